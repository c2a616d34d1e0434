import pytest

from sfsynth.dsp import BUFSIZE, SampleCursor
from sfsynth.interpolate import interpolate_4th_order, interpolate_7th_order


def _data(n):
    return [((i * 37) % 200) - 100 for i in range(n)]


def _plain(data, **kw):
    return SampleCursor(data=data, start=0, end=len(data) - 1, amp=1.0, **kw)


def _looped(data, loopstart, loopend, **kw):
    return SampleCursor(
        data=data,
        start=0,
        end=len(data) - 1,
        loopstart=loopstart,
        loopend=loopend,
        looping=True,
        amp=1.0,
        **kw,
    )


def test_4th_order_integer_phase_reproduces_samples():
    data = _data(10)
    cursor = _plain(data)
    out = interpolate_4th_order(cursor, 0.0, 1.0)
    assert out == pytest.approx([float(v) for v in data])
    assert cursor.phase == len(data) << 32


def test_4th_order_constant_signal_stays_constant_at_half_steps():
    data = [250] * 10
    cursor = _plain(data)
    out = interpolate_4th_order(cursor, 0.0, 0.5)
    assert len(out) == 2 * len(data)
    assert out == pytest.approx([250.0] * len(out), rel=1e-5)


def test_4th_order_looping_repeats_loop_section():
    data = _data(20)
    cursor = _looped(data, 4, 12)
    out = interpolate_4th_order(cursor, 0.0, 1.0)
    expected = data[:12]
    while len(expected) < BUFSIZE:
        expected += data[4:12]
    assert len(out) == BUFSIZE
    assert out == pytest.approx([float(v) for v in expected[:BUFSIZE]])
    assert cursor.has_looped
    assert 4 <= cursor.phase >> 32 < 12


def test_4th_order_amplitude_ramp():
    data = _data(10)
    cursor = _plain(data)
    out = interpolate_4th_order(cursor, 0.25, 1.0)
    assert cursor.amp == pytest.approx(1.0 + 0.25 * len(out))
    assert out[1] == pytest.approx(1.25 * data[1])


def test_4th_order_reading_before_data_raises():
    data = _data(10)
    cursor = SampleCursor(data=data, start=2, end=9, amp=1.0)
    with pytest.raises(IndexError):
        interpolate_4th_order(cursor, 0.0, 1.0)


def test_7th_order_renders_every_point_of_short_sample():
    data = _data(10)
    cursor = _plain(data)
    out = interpolate_7th_order(cursor, 0.0, 1.0)
    assert len(out) == len(data)
    assert cursor.phase == len(data) << 32


def test_7th_order_is_linear_in_the_data():
    data = _data(30)
    doubled = [2 * v for v in data]
    out = interpolate_7th_order(_plain(data), 0.0, 0.75)
    out2 = interpolate_7th_order(_plain(doubled), 0.0, 0.75)
    assert len(out) == len(out2)
    assert out2 == pytest.approx([2 * v for v in out])


def test_7th_order_zero_data_gives_silence():
    cursor = _plain([0] * 12)
    out = interpolate_7th_order(cursor, 0.0, 1.0)
    assert out == [0.0] * 12


def test_7th_order_looping_fills_buffer_and_stays_in_loop():
    data = _data(24)
    cursor = _looped(data, 6, 16)
    out = interpolate_7th_order(cursor, 0.0, 1.0)
    assert len(out) == BUFSIZE
    assert cursor.has_looped
    assert 6 <= cursor.phase >> 32 < 16


def test_7th_order_second_buffer_after_loop_continues():
    data = _data(24)
    cursor = _looped(data, 6, 16)
    interpolate_7th_order(cursor, 0.0, 1.0)
    out = interpolate_7th_order(cursor, 0.0, 1.0)
    assert len(out) == BUFSIZE
    assert 6 <= cursor.phase >> 32 < 16


def test_7th_order_amplitude_ramp():
    data = _data(10)
    cursor = _plain(data)
    out = interpolate_7th_order(cursor, -0.05, 1.0)
    assert cursor.amp == pytest.approx(1.0 - 0.05 * len(out))