import io
import struct

import pytest

from sfsynth.errors import ParseError
from sfsynth.riff import Chunk


def _chunk(cid, data):
    pad = b"\0" if len(data) % 2 else b""
    return cid.encode("ascii") + struct.pack("<I", len(data)) + data + pad


def _list(kind, children, cid="LIST"):
    return _chunk(cid, kind.encode("ascii") + b"".join(children))


def test_read_header():
    data = _chunk("abcd", b"1234")
    chunk = Chunk.read(io.BytesIO(data), 0)
    assert chunk == Chunk("abcd", 4, 0)


def test_read_type_and_contents():
    f = io.BytesIO(_list("INFO", [_chunk("INAM", b"Bank")]))
    chunk = Chunk.read(f, 0)
    assert chunk.id == "LIST"
    assert chunk.read_type(f) == "INFO"
    assert chunk.read_contents(f) == b"INFO" + _chunk("INAM", b"Bank")


def test_iter_children_with_padding():
    f = io.BytesIO(_list("sfbk", [_chunk("odd1", b"abc"), _chunk("even", b"wxyz")], cid="RIFF"))
    root = Chunk.read(f, 0)
    children = list(root.iter(f))
    assert [c.id for c in children] == ["odd1", "even"]
    assert [c.length for c in children] == [3, 4]
    assert children[0].read_contents(f) == b"abc"
    assert children[1].read_contents(f) == b"wxyz"


def test_iter_empty_list():
    f = io.BytesIO(_list("pdta", []))
    assert list(Chunk.read(f, 0).iter(f)) == []


def test_short_header_raises():
    with pytest.raises(ParseError):
        Chunk.read(io.BytesIO(b"RIF"), 0)


def test_truncated_contents_raise():
    f = io.BytesIO(b"data" + struct.pack("<I", 10) + b"abc")
    chunk = Chunk.read(f, 0)
    with pytest.raises(ParseError):
        chunk.read_contents(f)