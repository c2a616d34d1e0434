"""Minimal reader for RIFF chunk trees."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from .errors import ParseError

_HEADER = struct.Struct("<4sI")


def _read_exact(file: BinaryIO, offset: int, size: int) -> bytes:
    file.seek(offset)
    data = file.read(size)
    if len(data) != size:
        raise ParseError(
            f"unexpected end of file: wanted {size} bytes at offset {offset}"
        )
    return data


@dataclass(frozen=True)
class Chunk:
    """A RIFF chunk: its four-character id, payload length and file offset."""

    id: str
    length: int
    offset: int

    @classmethod
    def read(cls, file: BinaryIO, offset: int = 0) -> "Chunk":
        """Read the chunk header found at ``offset``."""
        raw_id, length = _HEADER.unpack(_read_exact(file, offset, _HEADER.size))
        return cls(raw_id.decode("latin-1"), length, offset)

    def read_type(self, file: BinaryIO) -> str:
        """Read the form type of a RIFF or LIST chunk."""
        return _read_exact(file, self.offset + _HEADER.size, 4).decode("latin-1")

    def read_contents(self, file: BinaryIO) -> bytes:
        """Read the whole payload of the chunk."""
        return _read_exact(file, self.offset + _HEADER.size, self.length)

    def iter(self, file: BinaryIO) -> Iterator["Chunk"]:
        """Yield the child chunks of a RIFF or LIST chunk."""
        pos = self.offset + _HEADER.size + 4
        end = self.offset + _HEADER.size + self.length
        while pos + _HEADER.size <= end:
            child = Chunk.read(file, pos)
            yield child
            pos += _HEADER.size + child.length + (child.length & 1)