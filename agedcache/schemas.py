from typing import Any
from pydantic import BaseModel, ConfigDict


class TimedEntry(BaseModel):
    """A stored value together with the moment it was admitted and how long it is kept.

    Notes
    -----
    - `admitted_at` is a timestamp in milliseconds, as read from the cache's time source.
    - `retention` is a duration in milliseconds. Zero or negative values are accepted
      and mean the entry is expired on the next check.
    - The model is frozen; `value` is held by reference and never copied.
    """

    model_config = ConfigDict(frozen=True)

    admitted_at: int | float
    retention: int | float
    value: Any
