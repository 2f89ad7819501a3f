"""Runtime configuration, read from the environment or a .env file."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from decouple import config


def _optional_int(value) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Read RPS_SEED and RPS_LOG_LEVEL.

    Raises ValueError if RPS_SEED is set but is not an integer.
    """
    seed = config("RPS_SEED", default=None, cast=_optional_int)
    log_level = config("RPS_LOG_LEVEL", default="WARNING").strip().upper() or "WARNING"
    return Settings(seed=seed, log_level=log_level)
