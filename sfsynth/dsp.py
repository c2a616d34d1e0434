"""Interpolation tables and sample-playback loops for one voice buffer."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

BUFSIZE = 64
TABLE_ROWS = 256
SINC_POINTS = 7

_MASK64 = (1 << 64) - 1
_FRACT_MAX = 4294967296.0
_HALF = 0x80000000


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass(frozen=True)
class DspTables:
    """Coefficient tables indexed by the top 8 bits of the phase fraction."""

    interp_coeff_linear: tuple[tuple[float, ...], ...]
    interp_coeff: tuple[tuple[float, ...], ...]
    sinc_table7: tuple[tuple[float, ...], ...]


def _build_tables() -> DspTables:
    linear = []
    cubic = []
    for i in range(TABLE_ROWS):
        x = i / TABLE_ROWS
        cubic.append(
            tuple(
                _f32(c)
                for c in (
                    x * (-0.5 + x * (1.0 - 0.5 * x)),
                    1.0 + x * x * (1.5 * x - 2.5),
                    x * (0.5 + x * (2.0 - 1.5 * x)),
                    0.5 * x * x * (x - 1.0),
                )
            )
        )
        linear.append((_f32(1.0 - x), _f32(x)))

    sinc = [[0.0] * SINC_POINTS for _ in range(TABLE_ROWS)]
    for i in range(SINC_POINTS):
        for i2 in range(TABLE_ROWS):
            shifted = i - SINC_POINTS / 2.0 + i2 / TABLE_ROWS
            if abs(shifted) > 0.000001:
                v = _f32(math.sin(shifted * math.pi)) / (math.pi * shifted)
                v *= 0.5 * (1.0 + math.cos(2.0 * math.pi * shifted / SINC_POINTS))
            else:
                v = 1.0
            sinc[TABLE_ROWS - i2 - 1][i] = _f32(v)

    return DspTables(
        interp_coeff_linear=tuple(linear),
        interp_coeff=tuple(cubic),
        sinc_table7=tuple(tuple(row) for row in sinc),
    )


@lru_cache(maxsize=None)
def dsp_tables() -> DspTables:
    """Return the shared interpolation tables, built on first use."""
    return _build_tables()


def phase_fract_to_tablerow(phase: int) -> int:
    """Table row for the fractional part of a 32.32 fixed-point phase."""
    return ((phase & 0xFFFFFFFF) & 0xFF000000) >> 24


def phase_set_float(value: float) -> int:
    """Convert a playback increment to a 32.32 fixed-point phase increment."""
    value = _f32(value)
    if math.isnan(value):
        return 0
    whole = int(value)
    left = (max(0, whole) << 32) & _MASK64
    right = (value - whole) * _FRACT_MAX
    right = int(right) if right > 0 else 0
    return (left | right) & _MASK64


@dataclass
class SampleCursor:
    """Playback state of one voice over its sample data.

    ``phase`` is a 32.32 fixed-point position in ``data``; ``amp`` is the
    current amplitude. Both advance as buffers are rendered.
    """

    data: Sequence[int]
    start: int
    end: int
    loopstart: int = 0
    loopend: int = 0
    looping: bool = False
    phase: int = 0
    amp: float = 0.0
    has_looped: bool = False

    def __post_init__(self) -> None:
        if self.looping and self.loopend <= self.loopstart:
            raise ValueError("loop end must lie after loop start")

    def _rewind(self, phase: int) -> int:
        self.has_looped = True
        return (phase - ((self.loopend - self.loopstart) << 32)) & _MASK64


def interpolate_none(cursor: SampleCursor, amp_incr: float, phase_incr: float) -> list[float]:
    """Render one buffer taking the sample point nearest the playback pointer.

    Returns the rendered points: ``BUFSIZE`` of them, or fewer when the
    sample ended without looping.
    """
    data = cursor.data
    phase = cursor.phase
    amp = cursor.amp
    incr = phase_set_float(phase_incr)
    end_index = cursor.loopend - 1 if cursor.looping else cursor.end

    out: list[float] = []
    while True:
        index = ((phase + _HALF) & _MASK64) >> 32
        while len(out) < BUFSIZE and index <= end_index:
            out.append(amp * data[index])
            phase = (phase + incr) & _MASK64
            index = ((phase + _HALF) & _MASK64) >> 32
            amp += amp_incr
        if not cursor.looping:
            break
        if index > end_index:
            phase = cursor._rewind(phase)
        if len(out) >= BUFSIZE:
            break

    cursor.phase = phase
    cursor.amp = amp
    return out


def interpolate_linear(cursor: SampleCursor, amp_incr: float, phase_incr: float) -> list[float]:
    """Render one buffer with straight-line interpolation between points.

    Returns the rendered points: ``BUFSIZE`` of them, or fewer when the
    sample ended without looping.
    """
    data = cursor.data
    coeffs = dsp_tables().interp_coeff_linear
    phase = cursor.phase
    amp = cursor.amp
    incr = phase_set_float(phase_incr)
    looping = cursor.looping

    # Last index whose second interpolation point is still inside the data.
    end_index = (cursor.loopend - 1 if looping else cursor.end) - 1
    point = data[cursor.loopstart] if looping else data[cursor.end]

    out: list[float] = []
    while True:
        index = phase >> 32
        while len(out) < BUFSIZE and index <= end_index:
            c0, c1 = coeffs[phase_fract_to_tablerow(phase)]
            out.append(amp * (c0 * data[index] + c1 * data[index + 1]))
            phase = (phase + incr) & _MASK64
            index = phase >> 32
            amp += amp_incr
        if len(out) >= BUFSIZE:
            break

        end_index += 1
        while index <= end_index and len(out) < BUFSIZE:
            c0, c1 = coeffs[phase_fract_to_tablerow(phase)]
            out.append(amp * (c0 * data[index] + c1 * point))
            phase = (phase + incr) & _MASK64
            index = phase >> 32
            amp += amp_incr
        if not looping:
            break
        if index > end_index:
            phase = cursor._rewind(phase)
        if len(out) >= BUFSIZE:
            break
        end_index -= 1

    cursor.phase = phase
    cursor.amp = amp
    return out