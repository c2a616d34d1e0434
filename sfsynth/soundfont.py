"""High-level view of a SoundFont 2 bank: presets, instruments and zones."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Optional, Sequence

from .errors import ParseError
from .generator import Generator, GeneratorAmountRange, GeneratorType
from .info import Info
from .modulator import Modulator
from .records import Bag, InstrumentHeader, PresetHeader, SampleHeader
from .sfdata import SampleData, SFData


@dataclass
class Zone:
    """One zone: its modulators and generators."""

    mod_list: list[Modulator] = field(default_factory=list)
    gen_list: list[Generator] = field(default_factory=list)

    def _amount(self, ty: GeneratorType):
        return next((g.amount for g in self.gen_list if g.ty == ty), None)

    def key_range(self) -> Optional[GeneratorAmountRange]:
        return self._amount(GeneratorType.KEY_RANGE)

    def vel_range(self) -> Optional[GeneratorAmountRange]:
        return self._amount(GeneratorType.VEL_RANGE)

    def instrument(self) -> Optional[int]:
        """Index of the instrument this preset zone refers to."""
        return self._amount(GeneratorType.INSTRUMENT)

    def sample(self) -> Optional[int]:
        """Index of the sample header this instrument zone refers to."""
        return self._amount(GeneratorType.SAMPLE_ID)


@dataclass
class Preset:
    header: PresetHeader
    zones: list[Zone]


@dataclass
class Instrument:
    header: InstrumentHeader
    zones: list[Zone]


def _zones(
    bags: Sequence[Bag],
    modulators: Sequence[Modulator],
    generators: Sequence[Generator],
    start: int,
    end: int,
) -> list[Zone]:
    zones = []
    for j in range(start, end):
        if j >= len(bags):
            raise ParseError(f"zone index {j} out of range")
        curr = bags[j]
        nxt = bags[j + 1] if j + 1 < len(bags) else None
        # Without a following bag the list end falls back to the bag count.
        mod_end = nxt.modulator_id if nxt is not None else len(bags)
        gen_end = nxt.generator_id if nxt is not None else len(bags)
        zones.append(
            Zone(
                mod_list=list(modulators[curr.modulator_id:mod_end]),
                gen_list=list(generators[curr.generator_id:gen_end]),
            )
        )
    return zones


def _bag_spans(headers: Sequence, bag_count: int):
    for i, header in enumerate(headers):
        end = headers[i + 1].bag_id if i + 1 < len(headers) else bag_count
        yield header, header.bag_id, end


@dataclass
class SoundFont2:
    """A SoundFont 2 bank with zones resolved for each preset and instrument."""

    info: Info
    presets: list[Preset]
    instruments: list[Instrument]
    sample_headers: list[SampleHeader]
    sample_data: SampleData

    @classmethod
    def load(cls, file: BinaryIO) -> "SoundFont2":
        return cls.from_data(SFData.load(file))

    @classmethod
    def from_data(cls, data: SFData) -> "SoundFont2":
        hydra = data.hydra

        instruments = []
        for header, start, end in _bag_spans(hydra.instrument_headers, len(hydra.instrument_bags)):
            zones = _zones(
                hydra.instrument_bags,
                hydra.instrument_modulators,
                hydra.instrument_generators,
                start,
                end,
            )
            if header.name != "EOS":
                instruments.append(Instrument(header, zones))

        presets = []
        for header, start, end in _bag_spans(hydra.preset_headers, len(hydra.preset_bags)):
            zones = _zones(
                hydra.preset_bags,
                hydra.preset_modulators,
                hydra.preset_generators,
                start,
                end,
            )
            if header.name != "EOP":
                presets.append(Preset(header, zones))

        return cls(
            info=data.info,
            presets=presets,
            instruments=instruments,
            sample_headers=[h for h in hydra.sample_headers if h.name != "EOS"],
            sample_data=data.sample_data,
        )

    def sort_presets(self) -> "SoundFont2":
        """Sort presets by bank, then preset number; returns ``self``."""
        self.presets.sort(key=lambda p: (p.header.bank << 16) | p.header.preset)
        return self