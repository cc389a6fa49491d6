from .cache import AgedCache
from .clock import ManualClock, MonotonicClock, SystemClock, TimeSource, resolve_time_source
from .schemas import TimedEntry
from .settings import Settings, settings

__all__ = [
    "AgedCache",
    "ManualClock",
    "MonotonicClock",
    "Settings",
    "SystemClock",
    "TimeSource",
    "TimedEntry",
    "resolve_time_source",
    "settings",
]
