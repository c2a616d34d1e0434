"""The INFO list: supplemental information about a bank."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import ParseError, UnexpectedMember
from .reader import Reader
from .riff import Chunk

_STRINGS = {
    "isng": "sound_engine",
    "INAM": "bank_name",
    "irom": "rom_name",
    "ICRD": "creation_date",
    "IENG": "engineers",
    "IPRD": "product",
    "ICOP": "copyright",
    "ICMT": "comments",
    "ISFT": "software",
}

_VERSIONS = {"ifil": "version", "iver": "rom_version"}


@dataclass(frozen=True)
class Version:
    major: int
    minor: int


@dataclass
class Info:
    """Supplemental information of a SoundFont bank."""

    version: Version
    sound_engine: str = ""
    bank_name: str = ""
    rom_name: Optional[str] = None
    rom_version: Optional[Version] = None
    creation_date: Optional[str] = None
    engineers: Optional[str] = None
    product: Optional[str] = None
    copyright: Optional[str] = None
    comments: Optional[str] = None
    software: Optional[str] = None

    @classmethod
    def read(cls, chunk: Chunk, file: BinaryIO) -> "Info":
        """Parse a ``LIST INFO`` chunk."""
        if chunk.id != "LIST" or chunk.read_type(file) != "INFO":
            raise ParseError("expected a LIST chunk of type INFO")
        values: dict = {}
        for child in list(chunk.iter(file)):
            reader = Reader(child.read_contents(file))
            if child.id in _VERSIONS:
                values[_VERSIONS[child.id]] = Version(reader.read_u16(), reader.read_u16())
            elif child.id in _STRINGS:
                values[_STRINGS[child.id]] = reader.read_string(child.length)
            else:
                raise UnexpectedMember("info", child)
        if "version" not in values:
            raise ParseError("INFO is missing the ifil version chunk")
        # isng and INAM are required by the format but often missing,
        # so they fall back to empty strings.
        return cls(**values)