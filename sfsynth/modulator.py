"""Modulator records of the SoundFont 2 hydra and the default modulators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from .errors import InvalidChunkSize, UnknownModulatorTransform
from .generator import GeneratorType, generator_type
from .reader import Reader


class GeneralPalette(IntEnum):
    """Sources of the general controller palette (SF2 section 8.2.1)."""

    NO_CONTROLLER = 0
    NOTE_ON_VELOCITY = 2
    NOTE_ON_KEY_NUMBER = 3
    POLY_PRESSURE = 10
    CHANNEL_PRESSURE = 13
    PITCH_WHEEL = 14
    PITCH_WHEEL_SENSITIVITY = 16
    LINK = 127


def _general_palette(value: int) -> Union[GeneralPalette, int]:
    try:
        return GeneralPalette(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class ControllerPalette:
    """Which palette a source draws from, and the controller within it.

    For the general palette ``value`` is a :class:`GeneralPalette` member,
    or a plain ``int`` when the format does not define that controller.
    For the MIDI palette it is the continuous controller number.
    """

    midi: bool
    value: int

    @classmethod
    def of_general(cls, value: int) -> "ControllerPalette":
        return cls(midi=False, value=_general_palette(value))

    @classmethod
    def of_midi(cls, index: int) -> "ControllerPalette":
        return cls(midi=True, value=index)

    @property
    def is_unknown(self) -> bool:
        """True for a general controller the format does not define."""
        return not self.midi and not isinstance(self.value, GeneralPalette)


class SourceDirection(Enum):
    """Direction in which a controller source moves (SF2 section 8.2.2)."""

    POSITIVE = 0
    NEGATIVE = 1


class SourcePolarity(Enum):
    """Unipolar or bipolar mapping of a controller (SF2 section 8.2.3)."""

    UNIPOLAR = 0
    BIPOLAR = 1


class SourceType(IntEnum):
    """Continuity of a controller source (SF2 section 8.2.4)."""

    LINEAR = 0
    CONCAVE = 1
    CONVEX = 2
    SWITCH = 3


def _source_type(value: int) -> Union[SourceType, int]:
    try:
        return SourceType(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class ModulatorSource:
    """A decoded modulator source enumerator (SF2 section 8.2)."""

    index: int
    controller_palette: ControllerPalette
    direction: SourceDirection
    polarity: SourcePolarity
    ty: int

    @classmethod
    def from_u16(cls, value: int) -> "ModulatorSource":
        """Decode the 16-bit source field of a modulator record."""
        index = value & 0x7F
        if value & (1 << 7):
            palette = ControllerPalette.of_midi(index)
        else:
            palette = ControllerPalette.of_general(index)
        direction = SourceDirection.NEGATIVE if value & (1 << 8) else SourceDirection.POSITIVE
        polarity = SourcePolarity.BIPOLAR if value & (1 << 9) else SourcePolarity.UNIPOLAR
        ty = _source_type((value >> 10) & 0x3F)
        return cls(index, palette, direction, polarity, ty)

    @property
    def is_unknown_type(self) -> bool:
        return not isinstance(self.ty, SourceType)

    def is_linear(self) -> bool:
        return self.ty == SourceType.LINEAR

    def is_concave(self) -> bool:
        return self.ty == SourceType.CONCAVE

    def is_convex(self) -> bool:
        return self.ty == SourceType.CONVEX

    def is_switch(self) -> bool:
        return self.ty == SourceType.SWITCH

    def is_unipolar(self) -> bool:
        return self.polarity is SourcePolarity.UNIPOLAR

    def is_bipolar(self) -> bool:
        return self.polarity is SourcePolarity.BIPOLAR

    def is_positive(self) -> bool:
        return self.direction is SourceDirection.POSITIVE

    def is_negative(self) -> bool:
        return self.direction is SourceDirection.NEGATIVE

    def is_cc(self) -> bool:
        return self.controller_palette.midi

    def is_gc(self) -> bool:
        return not self.controller_palette.midi


class ModulatorTransform(IntEnum):
    """Transform applied to a modulator's output (SF2 section 8.3)."""

    LINEAR = 0
    ABSOLUTE = 2

    @classmethod
    def from_u16(cls, value: int) -> "ModulatorTransform":
        try:
            return cls(value)
        except ValueError:
            raise UnknownModulatorTransform(value) from None


_RECORD_SIZE = 10


@dataclass(frozen=True)
class Modulator:
    """One modulator record."""

    src: ModulatorSource
    dest: GeneratorType
    amount: int
    amt_src: ModulatorSource
    transform: ModulatorTransform

    @classmethod
    def read(cls, reader: Reader, terminal: bool = False) -> "Modulator":
        """Read one record; a terminal record is treated as all zeros."""
        src = reader.read_u16()
        dest = reader.read_u16()
        amount = reader.read_i16()
        amt_src = reader.read_u16()
        transform = reader.read_u16()
        # The terminal record should be all zeros but often is not.
        if terminal:
            src = dest = amount = amt_src = transform = 0
        return cls(
            src=ModulatorSource.from_u16(src),
            dest=generator_type(dest),
            amount=amount,
            amt_src=ModulatorSource.from_u16(amt_src),
            transform=ModulatorTransform.from_u16(transform),
        )

    @classmethod
    def read_all(cls, data: bytes) -> list["Modulator"]:
        """Parse the contents of a pmod or imod chunk."""
        size = len(data)
        if size == 0 or size % _RECORD_SIZE:
            raise InvalidChunkSize("modulator", size)
        count = size // _RECORD_SIZE
        reader = Reader(data)
        return [cls.read(reader, i == count - 1) for i in range(count)]


def _source(
    index: int,
    palette: ControllerPalette,
    direction: SourceDirection = SourceDirection.POSITIVE,
    polarity: SourcePolarity = SourcePolarity.UNIPOLAR,
    ty: SourceType = SourceType.LINEAR,
) -> ModulatorSource:
    return ModulatorSource(index, palette, direction, polarity, ty)


_NO_SOURCE = _source(0, ControllerPalette.of_general(GeneralPalette.NO_CONTROLLER))


def _default(dest: GeneratorType, amount: int, src: ModulatorSource) -> Modulator:
    return Modulator(
        src=src,
        dest=dest,
        amount=amount,
        amt_src=_NO_SOURCE,
        transform=ModulatorTransform.LINEAR,
    )


# 8.4.1 MIDI note-on velocity to initial attenuation
DEFAULT_VEL2ATT_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _source(
        2,
        ControllerPalette.of_general(GeneralPalette.NOTE_ON_VELOCITY),
        SourceDirection.NEGATIVE,
        SourcePolarity.UNIPOLAR,
        SourceType.CONCAVE,
    ),
)

# 8.4.2 MIDI note-on velocity to filter cutoff (amount source 0 as in SF2.04)
DEFAULT_VEL2FILTER_MOD = _default(
    GeneratorType.INITIAL_FILTER_FC,
    -2400,
    _source(
        2,
        ControllerPalette.of_general(GeneralPalette.NOTE_ON_VELOCITY),
        SourceDirection.NEGATIVE,
    ),
)

# 8.4.3 MIDI channel pressure to vibrato LFO pitch depth
DEFAULT_AT2VIBLFO_MOD = _default(
    GeneratorType.VIB_LFO_TO_PITCH,
    50,
    _source(13, ControllerPalette.of_general(GeneralPalette.CHANNEL_PRESSURE)),
)

# 8.4.4 MIDI CC 1 (modulation wheel) to vibrato LFO pitch depth
DEFAULT_MOD2VIBLFO_MOD = _default(
    GeneratorType.VIB_LFO_TO_PITCH,
    50,
    _source(1, ControllerPalette.of_midi(1)),
)

# 8.4.5 MIDI CC 7 (channel volume) to initial attenuation
DEFAULT_ATT_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _source(
        7,
        ControllerPalette.of_midi(7),
        SourceDirection.NEGATIVE,
        SourcePolarity.UNIPOLAR,
        SourceType.CONCAVE,
    ),
)

# 8.4.6 MIDI CC 10 (pan) to pan position; 50% of 1000 tenths of a percent
DEFAULT_PAN_MOD = _default(
    GeneratorType.PAN,
    500,
    _source(
        10,
        ControllerPalette.of_midi(10),
        SourceDirection.POSITIVE,
        SourcePolarity.BIPOLAR,
    ),
)

# 8.4.7 MIDI CC 11 (expression) to initial attenuation
DEFAULT_EXPR_MOD = _default(
    GeneratorType.INITIAL_ATTENUATION,
    960,
    _source(
        11,
        ControllerPalette.of_midi(11),
        SourceDirection.NEGATIVE,
        SourcePolarity.UNIPOLAR,
        SourceType.CONCAVE,
    ),
)

# 8.4.8 MIDI CC 91 to reverb effects send
DEFAULT_REVERB_MOD = _default(
    GeneratorType.REVERB_EFFECTS_SEND,
    200,
    _source(91, ControllerPalette.of_midi(91)),
)

# 8.4.9 MIDI CC 93 to chorus effects send
DEFAULT_CHORUS_MOD = _default(
    GeneratorType.CHORUS_EFFECTS_SEND,
    200,
    _source(93, ControllerPalette.of_midi(93)),
)


def default_pitch_bend_mod(dest: GeneratorType) -> Modulator:
    """8.4.10 pitch wheel to initial pitch, scaled by wheel sensitivity.

    Initial pitch is not a standard generator, so the caller picks ``dest``.
    """
    return Modulator(
        src=_source(
            14,
            ControllerPalette.of_general(GeneralPalette.PITCH_WHEEL),
            SourceDirection.POSITIVE,
            SourcePolarity.BIPOLAR,
        ),
        dest=dest,
        amount=12700,
        amt_src=_source(
            16, ControllerPalette.of_general(GeneralPalette.PITCH_WHEEL_SENSITIVITY)
        ),
        transform=ModulatorTransform.LINEAR,
    )