import time
from typing import Protocol


class TimeSource(Protocol):
    """Anything that can report the current time in milliseconds."""

    def now(self) -> int:
        ...


class SystemClock:
    """Wall-clock time, milliseconds since the Unix epoch."""

    def now(self) -> int:
        return int(time.time() * 1000)


class MonotonicClock:
    """Monotonic time in milliseconds. The epoch is arbitrary but readings never decrease."""

    def now(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Steppable clock for deterministic tests.

    Parameters
    ----------
    start : int
        Initial reading in milliseconds.

    Notes
    -----
    - Time only moves when `advance` or `set` is called.
    - Moving backwards is rejected with `ValueError`.
    """

    def __init__(self, start: int = 0):
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, millis: int) -> int:
        """Move the clock forward by `millis` and return the new reading."""

        if millis < 0:
            raise ValueError(f"cannot advance clock by a negative amount: {millis}")
        self._now += millis
        return self._now

    def set(self, millis: int) -> None:
        if millis < self._now:
            raise ValueError(f"cannot move clock back from {self._now} to {millis}")
        self._now = millis


_TIME_SOURCES = {
    "system": SystemClock,
    "monotonic": MonotonicClock,
}


def resolve_time_source(name: str) -> TimeSource:
    """Build the time source registered under `name`.

    Raises
    ------
    ValueError
        If `name` is not one of the known clocks.
    """

    try:
        factory = _TIME_SOURCES[name]
    except KeyError:
        known = ", ".join(sorted(_TIME_SOURCES))
        raise ValueError(f"unknown time source {name!r} (expected one of: {known})") from None
    return factory()
