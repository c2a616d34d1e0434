import io
import struct

import pytest

from sfsynth.errors import ParseError, UnexpectedMember
from sfsynth.generator import GeneratorType
from sfsynth.hydra import Hydra
from sfsynth.riff import Chunk


def _chunk(cid, data):
    pad = b"\0" if len(data) % 2 else b""
    return cid.encode("ascii") + struct.pack("<I", len(data)) + data + pad


def _list(kind, children, cid="LIST"):
    return _chunk(cid, kind.encode("ascii") + b"".join(children))


def _name(text):
    return text.encode("ascii").ljust(20, b"\0")


def _subchunks():
    return {
        "phdr": _name("Sine") + struct.pack("<HHHIII", 0, 0, 0, 0, 0, 0)
        + _name("EOP") + struct.pack("<HHHIII", 0, 0, 1, 0, 0, 0),
        "pbag": struct.pack("<HHHH", 0, 0, 1, 0),
        "pmod": bytes(10),
        "pgen": struct.pack("<HH", 41, 0) + struct.pack("<HH", 0, 0),
        "inst": _name("SineInst") + struct.pack("<H", 0) + _name("EOS") + struct.pack("<H", 1),
        "ibag": struct.pack("<HHHH", 0, 0, 2, 0),
        "imod": bytes(10),
        "igen": struct.pack("<HBB", 43, 0, 127) + struct.pack("<HH", 53, 0) + struct.pack("<HH", 0, 0),
        "shdr": _name("Sine") + struct.pack("<IIIIIBbHH", 0, 100, 8, 90, 44100, 60, 0, 0, 1)
        + _name("EOS") + bytes(26),
    }


def _read(subchunks, kind="pdta"):
    f = io.BytesIO(_list(kind, [_chunk(k, v) for k, v in subchunks.items()]))
    return Hydra.read(Chunk.read(f, 0), f)


def test_read_all_lists():
    hydra = _read(_subchunks())
    assert [h.name for h in hydra.preset_headers] == ["Sine", "EOP"]
    assert len(hydra.preset_bags) == 2
    assert len(hydra.preset_modulators) == 1
    assert hydra.preset_generators[0].ty == GeneratorType.INSTRUMENT
    assert [h.name for h in hydra.instrument_headers] == ["SineInst", "EOS"]
    assert hydra.instrument_generators[1].ty == GeneratorType.SAMPLE_ID
    assert hydra.sample_headers[0].sample_rate == 44100


def test_pop_terminators():
    hydra = _read(_subchunks())
    hydra.pop_terminators()
    assert [h.name for h in hydra.preset_headers] == ["Sine"]
    assert len(hydra.preset_bags) == 1
    assert hydra.preset_modulators == []
    assert len(hydra.instrument_generators) == 2
    assert [h.name for h in hydra.sample_headers] == ["Sine"]


def test_pop_terminators_on_empty_list_raises():
    hydra = _read(_subchunks())
    hydra.pop_terminators()
    with pytest.raises(ParseError):
        hydra.pop_terminators()


def test_unexpected_member():
    subchunks = _subchunks()
    subchunks["junk"] = b"abcd"
    with pytest.raises(UnexpectedMember) as info:
        _read(subchunks)
    assert info.value.chunk.id == "junk"


def test_missing_subchunk():
    subchunks = _subchunks()
    del subchunks["shdr"]
    with pytest.raises(ParseError):
        _read(subchunks)


def test_wrong_list_type():
    with pytest.raises(ParseError):
        _read(_subchunks(), kind="INFO")