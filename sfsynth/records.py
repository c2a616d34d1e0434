"""Fixed-size hydra records: bags, instrument, preset and sample headers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, TypeVar

from .errors import InvalidChunkSize, UnknownSampleType
from .reader import Reader

_T = TypeVar("_T")


def _read_all(read: Callable[[Reader], _T], data: bytes, record_size: int, kind: str) -> list[_T]:
    size = len(data)
    if size == 0 or size % record_size:
        raise InvalidChunkSize(kind, size)
    reader = Reader(data)
    return [read(reader) for _ in range(size // record_size)]


@dataclass(frozen=True)
class Bag:
    """Index of a zone's first generator and first modulator."""

    generator_id: int
    modulator_id: int

    @classmethod
    def read(cls, reader: Reader) -> "Bag":
        return cls(generator_id=reader.read_u16(), modulator_id=reader.read_u16())

    @classmethod
    def read_all(cls, data: bytes) -> list["Bag"]:
        """Parse the contents of a pbag or ibag chunk."""
        return _read_all(cls.read, data, 4, "bag")


@dataclass(frozen=True)
class InstrumentHeader:
    name: str
    bag_id: int

    @classmethod
    def read(cls, reader: Reader) -> "InstrumentHeader":
        name = reader.read_string(20).rstrip()
        return cls(name=name, bag_id=reader.read_u16())

    @classmethod
    def read_all(cls, data: bytes) -> list["InstrumentHeader"]:
        """Parse the contents of an inst chunk."""
        return _read_all(cls.read, data, 22, "instrument")


@dataclass(frozen=True)
class PresetHeader:
    name: str
    preset: int
    bank: int
    bag_id: int
    library: int
    genre: int
    morphology: int

    @classmethod
    def read(cls, reader: Reader) -> "PresetHeader":
        return cls(
            name=reader.read_string(20).rstrip(),
            preset=reader.read_u16(),
            bank=reader.read_u16(),
            bag_id=reader.read_u16(),
            library=reader.read_u32(),
            genre=reader.read_u32(),
            morphology=reader.read_u32(),
        )

    @classmethod
    def read_all(cls, data: bytes) -> list["PresetHeader"]:
        """Parse the contents of a phdr chunk."""
        return _read_all(cls.read, data, 38, "preset")


class SampleLink(IntEnum):
    """Sample type and link flags of a sample header."""

    NONE = 0
    MONO_SAMPLE = 0x1
    RIGHT_SAMPLE = 0x2
    LEFT_SAMPLE = 0x4
    LINKED_SAMPLE = 0x8
    ROM_MONO_SAMPLE = 0x8001
    ROM_RIGHT_SAMPLE = 0x8002
    ROM_LEFT_SAMPLE = 0x8004
    ROM_LINKED_SAMPLE = 0x8008
    VORBIS_MONO_SAMPLE = 0x11
    VORBIS_RIGHT_SAMPLE = 0x12
    VORBIS_LEFT_SAMPLE = 0x14
    VORBIS_LINKED_SAMPLE = 0x18

    def is_mono(self) -> bool:
        return self in _MONO

    def is_right(self) -> bool:
        return self in _RIGHT

    def is_left(self) -> bool:
        return self in _LEFT

    def is_linked(self) -> bool:
        return self in _LINKED

    def is_rom(self) -> bool:
        return self in _ROM

    def is_vorbis(self) -> bool:
        return self in _VORBIS


_MONO = frozenset(
    {SampleLink.MONO_SAMPLE, SampleLink.ROM_MONO_SAMPLE, SampleLink.VORBIS_MONO_SAMPLE}
)
_RIGHT = frozenset(
    {SampleLink.RIGHT_SAMPLE, SampleLink.ROM_RIGHT_SAMPLE, SampleLink.VORBIS_RIGHT_SAMPLE}
)
_LEFT = frozenset(
    {SampleLink.LEFT_SAMPLE, SampleLink.ROM_LEFT_SAMPLE, SampleLink.VORBIS_LEFT_SAMPLE}
)
_LINKED = frozenset(
    {SampleLink.LINKED_SAMPLE, SampleLink.ROM_LINKED_SAMPLE, SampleLink.VORBIS_LINKED_SAMPLE}
)
_ROM = frozenset(
    {
        SampleLink.ROM_MONO_SAMPLE,
        SampleLink.ROM_RIGHT_SAMPLE,
        SampleLink.ROM_LEFT_SAMPLE,
        SampleLink.ROM_LINKED_SAMPLE,
    }
)
_VORBIS = frozenset(
    {
        SampleLink.VORBIS_MONO_SAMPLE,
        SampleLink.VORBIS_RIGHT_SAMPLE,
        SampleLink.VORBIS_LEFT_SAMPLE,
        SampleLink.VORBIS_LINKED_SAMPLE,
    }
)


@dataclass(frozen=True)
class SampleHeader:
    name: str
    start: int
    end: int
    loop_start: int
    loop_end: int
    sample_rate: int
    origpitch: int
    pitchadj: int
    sample_link: int
    sample_type: SampleLink

    @classmethod
    def read(cls, reader: Reader) -> "SampleHeader":
        name = reader.read_string(20).rstrip()
        start = reader.read_u32()
        end = reader.read_u32()
        loop_start = reader.read_u32()
        loop_end = reader.read_u32()
        sample_rate = reader.read_u32()
        origpitch = reader.read_u8()
        pitchadj = reader.read_i8()
        sample_link = reader.read_u16()
        raw_type = reader.read_u16()
        try:
            sample_type = SampleLink(raw_type)
        except ValueError:
            raise UnknownSampleType(raw_type) from None
        return cls(
            name=name,
            start=start,
            end=end,
            loop_start=loop_start,
            loop_end=loop_end,
            sample_rate=sample_rate,
            origpitch=origpitch,
            pitchadj=pitchadj,
            sample_link=sample_link,
            sample_type=sample_type,
        )

    @classmethod
    def read_all(cls, data: bytes) -> list["SampleHeader"]:
        """Parse the contents of a shdr chunk."""
        return _read_all(cls.read, data, 46, "sample")