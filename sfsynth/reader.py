"""Sequential little-endian reader over a byte buffer."""

from __future__ import annotations

import struct

from .errors import ParseError


class Reader:
    """Reads little-endian values from a byte buffer, front to back."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, length: int) -> bytes:
        """Return the next ``length`` bytes."""
        end = self._pos + length
        if length < 0 or end > len(self._data):
            raise ParseError(
                f"unexpected end of data: wanted {length} bytes at offset {self._pos}"
            )
        out = self._data[self._pos:end]
        self._pos = end
        return out

    def read_string(self, length: int) -> str:
        """Read a fixed-size field holding a NUL-terminated UTF-8 string."""
        raw = self.read(length).split(b"\0", 1)[0]
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"invalid string: {exc}") from exc

    def _unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))[0]

    def read_u8(self) -> int:
        return self._unpack("<B")

    def read_u16(self) -> int:
        return self._unpack("<H")

    def read_u32(self) -> int:
        return self._unpack("<I")

    def read_i8(self) -> int:
        return self._unpack("<b")

    def read_i16(self) -> int:
        return self._unpack("<h")