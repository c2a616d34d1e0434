import io
import struct

import pytest

from sfsynth.cli import describe, main
from sfsynth.soundfont import SoundFont2


def _chunk(cid, data):
    pad = b"\0" if len(data) % 2 else b""
    return cid.encode("ascii") + struct.pack("<I", len(data)) + data + pad


def _list(kind, children, cid="LIST"):
    return _chunk(cid, kind.encode("ascii") + b"".join(children))


def _name(text):
    return text.encode("ascii").ljust(20, b"\0")


def _font_bytes():
    pdta = _list("pdta", [
        _chunk("phdr", _name("Sine") + struct.pack("<HHHIII", 0, 0, 0, 0, 0, 0)
               + _name("EOP") + struct.pack("<HHHIII", 0, 0, 1, 0, 0, 0)),
        _chunk("pbag", struct.pack("<HHHH", 0, 0, 1, 0)),
        _chunk("pmod", bytes(10)),
        _chunk("pgen", struct.pack("<HH", 41, 0) + struct.pack("<HH", 0, 0)),
        _chunk("inst", _name("SineInst") + struct.pack("<H", 0) + _name("EOS") + struct.pack("<H", 1)),
        _chunk("ibag", struct.pack("<HHHH", 0, 0, 2, 0)),
        _chunk("imod", bytes(10)),
        _chunk("igen", struct.pack("<HBB", 43, 0, 127) + struct.pack("<HH", 53, 0) + struct.pack("<HH", 0, 0)),
        _chunk("shdr", _name("Sine") + struct.pack("<IIIIIBbHH", 0, 100, 8, 90, 44100, 60, 0, 0, 1)
               + _name("EOS") + bytes(26)),
    ])
    return _list("sfbk", [
        _list("INFO", [_chunk("ifil", struct.pack("<HH", 2, 1))]),
        _list("sdta", [_chunk("smpl", bytes(8))]),
        pdta,
    ], cid="RIFF")


EXPECTED = '====== Preset =======\nName: Sine\nInstruments: [("SineInst", 1)]\n\n'


def test_describe():
    font = SoundFont2.load(io.BytesIO(_font_bytes()))
    assert describe(font) == EXPECTED


def test_describe_without_presets():
    font = SoundFont2.load(io.BytesIO(_font_bytes()))
    font.presets = []
    assert describe(font) == ""


def test_main_prints_presets(tmp_path, capsys):
    path = tmp_path / "font.sf2"
    path.write_bytes(_font_bytes())
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.sf2")]) == 1
    assert "sfsynth:" in capsys.readouterr().err


def test_main_invalid_file(tmp_path, capsys):
    path = tmp_path / "bad.sf2"
    path.write_bytes(b"garbage!")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""