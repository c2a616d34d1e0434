"""The pdta list: preset, instrument and sample records."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import BinaryIO

from .errors import ParseError, UnexpectedMember
from .generator import Generator
from .modulator import Modulator
from .records import Bag, InstrumentHeader, PresetHeader, SampleHeader
from .riff import Chunk

_SUBCHUNKS = {
    "phdr": ("preset_headers", PresetHeader.read_all),
    "pbag": ("preset_bags", Bag.read_all),
    "pmod": ("preset_modulators", Modulator.read_all),
    "pgen": ("preset_generators", Generator.read_all),
    "inst": ("instrument_headers", InstrumentHeader.read_all),
    "ibag": ("instrument_bags", Bag.read_all),
    "imod": ("instrument_modulators", Modulator.read_all),
    "igen": ("instrument_generators", Generator.read_all),
    "shdr": ("sample_headers", SampleHeader.read_all),
}


@dataclass
class Hydra:
    """All record lists of the pdta chunk, terminators included."""

    preset_headers: list[PresetHeader]
    preset_bags: list[Bag]
    preset_modulators: list[Modulator]
    preset_generators: list[Generator]
    instrument_headers: list[InstrumentHeader]
    instrument_bags: list[Bag]
    instrument_modulators: list[Modulator]
    instrument_generators: list[Generator]
    sample_headers: list[SampleHeader]

    @classmethod
    def read(cls, chunk: Chunk, file: BinaryIO) -> "Hydra":
        """Parse a ``LIST pdta`` chunk."""
        if chunk.id != "LIST" or chunk.read_type(file) != "pdta":
            raise ParseError("expected a LIST chunk of type pdta")
        found: dict[str, list] = {}
        for child in list(chunk.iter(file)):
            entry = _SUBCHUNKS.get(child.id)
            if entry is None:
                raise UnexpectedMember("hydra", child)
            name, parse = entry
            found[name] = parse(child.read_contents(file))
        missing = [name for name, _ in _SUBCHUNKS.values() if name not in found]
        if missing:
            raise ParseError(f"pdta is missing: {', '.join(missing)}")
        return cls(**found)

    def pop_terminators(self) -> None:
        """Drop the terminal record from every list."""
        for field in fields(self):
            records = getattr(self, field.name)
            if not records:
                raise ParseError(f"{field.name} has no terminal record")
            records.pop()