import time

import pytest

from agedcache import ManualClock, MonotonicClock, SystemClock, resolve_time_source


def test_manual_clock_starts_at_given_value():
    assert ManualClock().now() == 0
    assert ManualClock(start=42).now() == 42


def test_manual_clock_advance_and_set():
    clock = ManualClock()
    assert clock.advance(10) == 10
    assert clock.advance(0) == 10
    clock.set(25)
    assert clock.now() == 25
    clock.set(25)
    assert clock.now() == 25


def test_manual_clock_rejects_going_backwards():
    clock = ManualClock(start=100)
    with pytest.raises(ValueError):
        clock.advance(-1)
    with pytest.raises(ValueError):
        clock.set(99)
    assert clock.now() == 100


def test_system_clock_reports_epoch_millis():
    before = int(time.time() * 1000)
    reading = SystemClock().now()
    after = int(time.time() * 1000)
    assert isinstance(reading, int)
    assert before <= reading <= after


def test_monotonic_clock_never_decreases():
    clock = MonotonicClock()
    readings = [clock.now() for _ in range(100)]
    assert all(isinstance(r, int) for r in readings)
    assert readings == sorted(readings)


@pytest.mark.parametrize("name, expected", [("system", SystemClock), ("monotonic", MonotonicClock)])
def test_resolve_time_source(name, expected):
    assert isinstance(resolve_time_source(name), expected)


def test_resolve_unknown_time_source():
    with pytest.raises(ValueError, match="unknown time source 'sundial'"):
        resolve_time_source("sundial")
