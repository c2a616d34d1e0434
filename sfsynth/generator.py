"""Generator records of the SoundFont 2 hydra."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from .errors import InvalidChunkSize, UnknownGeneratorType
from .reader import Reader


class GeneratorType(IntEnum):
    """Generator operators, numbered as in the SoundFont 2 format."""

    START_ADDRS_OFFSET = 0
    END_ADDRS_OFFSET = 1
    STARTLOOP_ADDRS_OFFSET = 2
    ENDLOOP_ADDRS_OFFSET = 3
    START_ADDRS_COARSE_OFFSET = 4
    MOD_LFO_TO_PITCH = 5
    VIB_LFO_TO_PITCH = 6
    MOD_ENV_TO_PITCH = 7
    INITIAL_FILTER_FC = 8
    INITIAL_FILTER_Q = 9
    MOD_LFO_TO_FILTER_FC = 10
    MOD_ENV_TO_FILTER_FC = 11
    END_ADDRS_COARSE_OFFSET = 12
    MOD_LFO_TO_VOLUME = 13
    UNUSED1 = 14
    CHORUS_EFFECTS_SEND = 15
    REVERB_EFFECTS_SEND = 16
    PAN = 17
    UNUSED2 = 18
    UNUSED3 = 19
    UNUSED4 = 20
    DELAY_MOD_LFO = 21
    FREQ_MOD_LFO = 22
    DELAY_VIB_LFO = 23
    FREQ_VIB_LFO = 24
    DELAY_MOD_ENV = 25
    ATTACK_MOD_ENV = 26
    HOLD_MOD_ENV = 27
    DECAY_MOD_ENV = 28
    SUSTAIN_MOD_ENV = 29
    RELEASE_MOD_ENV = 30
    KEYNUM_TO_MOD_ENV_HOLD = 31
    KEYNUM_TO_MOD_ENV_DECAY = 32
    DELAY_VOL_ENV = 33
    ATTACK_VOL_ENV = 34
    HOLD_VOL_ENV = 35
    DECAY_VOL_ENV = 36
    SUSTAIN_VOL_ENV = 37
    RELEASE_VOL_ENV = 38
    KEYNUM_TO_VOL_ENV_HOLD = 39
    KEYNUM_TO_VOL_ENV_DECAY = 40
    INSTRUMENT = 41
    RESERVED1 = 42
    KEY_RANGE = 43
    VEL_RANGE = 44
    STARTLOOP_ADDRS_COARSE_OFFSET = 45
    KEYNUM = 46
    VELOCITY = 47
    INITIAL_ATTENUATION = 48
    RESERVED2 = 49
    ENDLOOP_ADDRS_COARSE_OFFSET = 50
    COARSE_TUNE = 51
    FINE_TUNE = 52
    SAMPLE_ID = 53
    SAMPLE_MODES = 54
    RESERVED3 = 55
    SCALE_TUNING = 56
    EXCLUSIVE_CLASS = 57
    OVERRIDING_ROOT_KEY = 58
    UNUSED5 = 59
    END_OPER = 60


def generator_type(value: int) -> GeneratorType:
    """Return the generator type numbered ``value``."""
    try:
        return GeneratorType(value)
    except ValueError:
        raise UnknownGeneratorType(value) from None


@dataclass(frozen=True)
class GeneratorAmountRange:
    """A low/high pair, used by the key and velocity range generators."""

    low: int
    high: int


GeneratorAmount = Union[int, GeneratorAmountRange]

_RECORD_SIZE = 4


@dataclass(frozen=True)
class Generator:
    """One generator: an operator and its amount."""

    ty: GeneratorType
    amount: GeneratorAmount

    @classmethod
    def read(cls, reader: Reader) -> "Generator":
        ty = generator_type(reader.read_u16())
        amount: GeneratorAmount
        if ty in (GeneratorType.KEY_RANGE, GeneratorType.VEL_RANGE):
            amount = GeneratorAmountRange(low=reader.read_u8(), high=reader.read_u8())
        elif ty in (GeneratorType.INSTRUMENT, GeneratorType.SAMPLE_ID):
            amount = reader.read_u16()
        else:
            amount = reader.read_i16()
        return cls(ty, amount)

    @classmethod
    def read_all(cls, data: bytes) -> list["Generator"]:
        """Parse the contents of a pgen or igen chunk."""
        size = len(data)
        if size == 0 or size % _RECORD_SIZE:
            raise InvalidChunkSize("generator", size)
        reader = Reader(data)
        return [cls.read(reader) for _ in range(size // _RECORD_SIZE)]