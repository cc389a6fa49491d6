from typing import Literal

from pydantic import BaseModel


class Settings(BaseModel):
    """Immutable runtime configuration for caches built via `AgedCache.from_settings`.

    Notes
    -----
    - Values here are not read from environment variables. Build a `Settings`
      instance explicitly if you need something other than the defaults.
    - `time_source` names the clock used to stamp and age entries:
      `"system"` is the wall clock, `"monotonic"` never goes backwards.
    """

    time_source: Literal["system", "monotonic"] = "system"


settings = Settings()
