from __future__ import annotations
import os
import logging
from functools import lru_cache
from typing import Callable, TypeVar

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DATA_PATH = "data/filtered_ceden_mercury.csv"

class Settings(BaseModel):
    """Runtime settings, read from ``FISHTOX_*`` environment variables."""
    data_path: str = Field(default=DEFAULT_DATA_PATH, description="CSV path or http(s) URL")
    log_level: str = Field(default="INFO")
    http_timeout: float = Field(default=10.0, gt=0)
    min_trend_samples: int = Field(default=5, ge=1)
    min_trend_r_squared: float = Field(default=0.1, ge=0.0, le=1.0)
    trend_points: int = Field(default=50, ge=1)

def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using default %r", name, raw, default)
        return default

def settings_from_env() -> Settings:
    defaults = Settings()
    values = {
        "data_path": _env("FISHTOX_DATA_PATH", defaults.data_path, str),
        "log_level": _env("FISHTOX_LOG_LEVEL", defaults.log_level, str).upper(),
        "http_timeout": _env("FISHTOX_HTTP_TIMEOUT", defaults.http_timeout, float),
        "min_trend_samples": _env("FISHTOX_MIN_TREND_SAMPLES", defaults.min_trend_samples, int),
        "min_trend_r_squared": _env("FISHTOX_MIN_TREND_R2", defaults.min_trend_r_squared, float),
        "trend_points": _env("FISHTOX_TREND_POINTS", defaults.trend_points, int),
    }
    # Out-of-range values are dropped field by field so one bad variable
    # does not discard the rest.
    ok = {}
    for key, value in values.items():
        try:
            Settings(**{key: value})
        except ValueError:
            logger.warning("Ignoring out-of-range setting %s=%r", key, value)
            continue
        ok[key] = value
    return Settings(**ok)

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return settings_from_env()

def configure_logging(level: str | None = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
