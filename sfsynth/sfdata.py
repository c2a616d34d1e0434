"""Top level of a SoundFont 2 file: INFO, sdta and pdta lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import ParseError, UnexpectedMember
from .hydra import Hydra
from .info import Info
from .riff import Chunk


@dataclass
class SampleData:
    """Chunks holding the sample points.

    ``smpl`` holds the upper 16 bits of each point, ``sm24`` the optional
    lower 8 bits. The contents are read from the file on demand.
    """

    smpl: Optional[Chunk] = None
    sm24: Optional[Chunk] = None

    @classmethod
    def read(cls, chunk: Chunk, file: BinaryIO) -> "SampleData":
        """Parse a ``LIST sdta`` chunk."""
        if chunk.id != "LIST" or chunk.read_type(file) != "sdta":
            raise ParseError("expected a LIST chunk of type sdta")
        data = cls()
        for child in chunk.iter(file):
            if child.id == "smpl":
                data.smpl = child
            elif child.id == "sm24":
                data.sm24 = child
            else:
                raise UnexpectedMember("sample data", child)
        return data


@dataclass
class SFData:
    """The three parsed sections of a SoundFont 2 file."""

    info: Info
    sample_data: SampleData
    hydra: Hydra

    @classmethod
    def load(cls, file: BinaryIO) -> "SFData":
        """Parse a ``RIFF sfbk`` file."""
        root = Chunk.read(file, 0)
        if root.id != "RIFF" or root.read_type(file) != "sfbk":
            raise ParseError("not a SoundFont 2 file: expected RIFF sfbk")
        sections: dict = {}
        for child in list(root.iter(file)):
            if child.id != "LIST":
                raise UnexpectedMember("root", child)
            kind = child.read_type(file)
            if kind == "INFO":
                sections["info"] = Info.read(child, file)
            elif kind == "sdta":
                sections["sample_data"] = SampleData.read(child, file)
            elif kind == "pdta":
                sections["hydra"] = Hydra.read(child, file)
            else:
                raise UnexpectedMember("root", child)
        missing = [name for name in ("info", "sample_data", "hydra") if name not in sections]
        if missing:
            raise ParseError(f"file is missing: {', '.join(missing)}")
        return cls(**sections)