"""Cubic and seven-point sinc interpolation loops for one voice buffer."""

from __future__ import annotations

from typing import Callable, Sequence

from .dsp import BUFSIZE, SampleCursor, dsp_tables, phase_fract_to_tablerow, phase_set_float

_MASK64 = (1 << 64) - 1
_HALF = 0x80000000


class _Render:
    """Output buffer under construction plus the advancing phase and amplitude."""

    def __init__(
        self,
        cursor: SampleCursor,
        table: Sequence[Sequence[float]],
        amp_incr: float,
        phase_incr: float,
        phase: int,
    ) -> None:
        self.data = cursor.data
        self.table = table
        self.phase = phase
        self.amp = cursor.amp
        self.amp_incr = amp_incr
        self.incr = phase_set_float(phase_incr)
        self.out: list[float] = []

    @property
    def index(self) -> int:
        return self.phase >> 32

    @property
    def full(self) -> bool:
        return len(self.out) >= BUFSIZE

    def point(self, index: int) -> int:
        if index < 0:
            raise IndexError(f"sample index {index} lies before the sample data")
        return self.data[index]

    def run(
        self,
        cond: Callable[[int], bool],
        points: Callable[[int], Sequence[int]],
    ) -> None:
        """Render points while ``cond`` holds for the current index."""
        while not self.full and cond(self.index):
            row = self.table[phase_fract_to_tablerow(self.phase)]
            values = points(self.index)
            self.out.append(self.amp * sum(c * v for c, v in zip(row, values)))
            self.phase = (self.phase + self.incr) & _MASK64
            self.amp += self.amp_incr

    def rewind(self, cursor: SampleCursor) -> None:
        self.phase = (self.phase - ((cursor.loopend - cursor.loopstart) << 32)) & _MASK64


def interpolate_4th_order(cursor: SampleCursor, amp_incr: float, phase_incr: float) -> list[float]:
    """Render one buffer with 4th order (cubic) interpolation.

    Returns the rendered points: ``BUFSIZE`` of them, or fewer when the
    sample ended without looping.
    """
    r = _Render(cursor, dsp_tables().interp_coeff, amp_incr, phase_incr, cursor.phase)
    p = r.point
    looping = cursor.looping

    # Last index before the 4th interpolation point needs special handling.
    end_index = (cursor.loopend - 1 if looping else cursor.end) - 2

    if cursor.has_looped:
        start_index = cursor.loopstart
        start_point = p(cursor.loopend - 1)
    else:
        start_index = cursor.start
        start_point = p(cursor.start)

    if looping:
        end_point1 = p(cursor.loopstart)
        end_point2 = p(cursor.loopstart + 1)
    else:
        end_point1 = end_point2 = p(cursor.end)

    while True:
        r.run(
            lambda i: i == start_index,
            lambda i: (start_point, p(i), p(i + 1), p(i + 2)),
        )
        r.run(
            lambda i: i <= end_index,
            lambda i: (p(i - 1), p(i), p(i + 1), p(i + 2)),
        )
        if r.full:
            break

        end_index += 1
        r.run(
            lambda i: i <= end_index,
            lambda i: (p(i - 1), p(i), p(i + 1), end_point1),
        )
        end_index += 1
        r.run(
            lambda i: i <= end_index,
            lambda i: (p(i - 1), p(i), end_point1, end_point2),
        )

        if not looping:
            break
        if r.index > end_index:
            r.rewind(cursor)
            if not cursor.has_looped:
                cursor.has_looped = True
                start_index = cursor.loopstart
                start_point = p(cursor.loopend - 1)
        if r.full:
            break
        end_index -= 2

    cursor.phase = r.phase
    cursor.amp = r.amp
    return r.out


def interpolate_7th_order(cursor: SampleCursor, amp_incr: float, phase_incr: float) -> list[float]:
    """Render one buffer with 7-point windowed sinc interpolation.

    Returns the rendered points: ``BUFSIZE`` of them, or fewer when the
    sample ended without looping.
    """
    # The interpolation is centred on the 4th point, so work half a sample ahead.
    r = _Render(
        cursor,
        dsp_tables().sinc_table7,
        amp_incr,
        phase_incr,
        (cursor.phase + _HALF) & _MASK64,
    )
    p = r.point
    looping = cursor.looping

    end_index = (cursor.loopend - 1 if looping else cursor.end) - 3

    if cursor.has_looped:
        start_index = cursor.loopstart
        start_points = [p(cursor.loopend - 1), p(cursor.loopend - 2), p(cursor.loopend - 3)]
    else:
        start_index = cursor.start
        start_points = [p(cursor.start)] * 3

    if looping:
        end_points = [p(cursor.loopstart), p(cursor.loopstart + 1), p(cursor.loopstart + 2)]
    else:
        end_points = [p(cursor.end)] * 3

    while True:
        r.run(
            lambda i: i == start_index,
            lambda i: (
                start_points[2], start_points[1], start_points[0],
                p(i), p(i + 1), p(i + 2), p(i + 3),
            ),
        )
        start_index += 1
        r.run(
            lambda i: i == start_index,
            lambda i: (
                start_points[1], start_points[0], p(i - 1),
                p(i), p(i + 1), p(i + 2), p(i + 3),
            ),
        )
        start_index += 1
        r.run(
            lambda i: i == start_index,
            lambda i: (
                start_points[0], p(i - 2), p(i - 1),
                p(i), p(i + 1), p(i + 2), p(i + 3),
            ),
        )
        start_index -= 2

        r.run(
            lambda i: i <= end_index,
            lambda i: (p(i - 3), p(i - 2), p(i - 1), p(i), p(i + 1), p(i + 2), p(i + 3)),
        )
        if r.full:
            break

        end_index += 1
        r.run(
            lambda i: i <= end_index,
            lambda i: (p(i - 3), p(i - 2), p(i - 1), p(i), p(i + 1), p(i + 2), end_points[0]),
        )
        end_index += 1
        r.run(
            lambda i: i <= end_index,
            lambda i: (
                p(i - 3), p(i - 2), p(i - 1), p(i), p(i + 1),
                end_points[0], end_points[1],
            ),
        )
        end_index += 1
        r.run(
            lambda i: i <= end_index,
            lambda i: (
                p(i - 3), p(i - 2), p(i - 1), p(i),
                end_points[0], end_points[1], end_points[2],
            ),
        )

        if not looping:
            break
        if r.index > end_index:
            r.rewind(cursor)
            if not cursor.has_looped:
                cursor.has_looped = True
                start_index = cursor.loopstart
                start_points = [
                    p(cursor.loopend - 1),
                    p(cursor.loopend - 2),
                    p(cursor.loopend - 3),
                ]
        if r.full:
            break
        end_index -= 3

    cursor.phase = (r.phase - _HALF) & _MASK64
    cursor.amp = r.amp
    return r.out