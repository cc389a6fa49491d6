import logging
from typing import Any, Dict, Generic, Hashable, Optional, TypeVar

from .clock import SystemClock, TimeSource, resolve_time_source
from .schemas import TimedEntry
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class AgedCache(Generic[K, V]):
    """Key/value cache where every entry carries its own retention period.

    Parameters
    ----------
    time_source : Optional[TimeSource]
        Clock used to stamp and age entries. Defaults to `SystemClock()`.

    Notes
    -----
    - An entry is live while `now - admitted_at < retention`; at exactly
      `retention` milliseconds it is expired.
    - Expiration is lazy. `clear_expired`, `size` and `is_empty` remove stale
      entries; `get` only hides them and leaves them in place.
    - There is no background reaper and no locking. Use from a single thread.
    """

    def __init__(self, time_source: Optional[TimeSource] = None):
        self._time_source = time_source if time_source is not None else SystemClock()
        self._entries: Dict[K, TimedEntry] = {}

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AgedCache[K, V]":
        """Build a cache using the clock named in `settings` (module defaults when omitted)."""

        settings = settings or default_settings
        return cls(resolve_time_source(settings.time_source))

    @property
    def time_source(self) -> TimeSource:
        return self._time_source

    def put(self, key: K, value: V, retention_in_millis: int) -> None:
        """Insert or replace `key`, stamped with the current time.

        Parameters
        ----------
        key : K
            Hashable cache key.
        value : V
            Arbitrary Python object to store.
        retention_in_millis : int
            How long the entry stays live. Zero or negative values are accepted
            and make the entry expire immediately.
        """

        now = self._time_source.now()
        # stored as given, no coercion of timestamps or retention
        self._entries[key] = TimedEntry.model_construct(admitted_at=now, retention=retention_in_millis, value=value)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for `key` if present and still live.

        Parameters
        ----------
        key : K
            Cache key.
        default : Optional[V]
            Returned when the key is missing or its entry has expired.

        Returns
        -------
        Optional[V]
            The stored value, or `default`.

        Notes
        -----
        - Does not evict: a stale entry stays in place until the next
          `clear_expired`, `size` or `is_empty` call, or until it is overwritten.
        """

        entry = self._entries.get(key)
        if entry is None:
            return default
        if not _is_live(entry, self._time_source.now()):
            return default
        return entry.value

    def clear_expired(self) -> int:
        """Remove every entry whose retention has elapsed and return how many were removed."""

        now = self._time_source.now()
        # iterate over a snapshot, the dict is mutated below
        stale = [key for key, entry in list(self._entries.items()) if not _is_live(entry, now)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug("evicted %d expired cache entries, %d remaining", len(stale), len(self._entries))
        return len(stale)

    def size(self) -> int:
        """Number of live entries. Evicts expired entries first."""

        self.clear_expired()
        return len(self._entries)

    def is_empty(self) -> bool:
        """Whether no live entries remain. Evicts expired entries first."""

        self.clear_expired()
        return not self._entries

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        # same liveness rule as get, without eviction
        entry = self._entries.get(key)
        return entry is not None and _is_live(entry, self._time_source.now())


def _is_live(entry: TimedEntry, now: int | float) -> bool:
    return now - entry.admitted_at < entry.retention
