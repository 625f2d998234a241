"""Engine settings read from the environment (and a local .env, if present)."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from models.hole_score import MAX_GROSS_SCORE, MIN_GROSS_SCORE
from models.scoring_config import ScoringConfiguration

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _level_env(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip().upper()
    return value if value in LOG_LEVELS else default


class EngineSettings(BaseModel):
    log_level: str = "INFO"
    default_scoring: ScoringConfiguration = Field(default_factory=ScoringConfiguration)
    # Gross score limits can be narrowed, never widened past what HoleScores stores.
    min_gross_score: int = Field(MIN_GROSS_SCORE, ge=MIN_GROSS_SCORE, le=MAX_GROSS_SCORE)
    max_gross_score: int = Field(MAX_GROSS_SCORE, ge=MIN_GROSS_SCORE, le=MAX_GROSS_SCORE)
    max_strokes_given: int = Field(18, ge=0)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @model_validator(mode='after')
    def check_score_range(self):
        if self.min_gross_score > self.max_gross_score:
            raise ValueError("min_gross_score cannot exceed max_gross_score")
        return self

    @classmethod
    def from_env(cls) -> "EngineSettings":
        defaults = ScoringConfiguration()
        return cls(
            log_level=_level_env("VOOR_LOG_LEVEL", "INFO"),
            default_scoring=ScoringConfiguration(
                eagle_or_better=_int_env("VOOR_POINTS_EAGLE", defaults.eagle_or_better),
                birdie=_int_env("VOOR_POINTS_BIRDIE", defaults.birdie),
                par=_int_env("VOOR_POINTS_PAR", defaults.par),
                bogey=_int_env("VOOR_POINTS_BOGEY", defaults.bogey),
            ),
            min_gross_score=_int_env("VOOR_MIN_GROSS_SCORE", MIN_GROSS_SCORE),
            max_gross_score=_int_env("VOOR_MAX_GROSS_SCORE", MAX_GROSS_SCORE),
            max_strokes_given=_int_env("VOOR_MAX_STROKES_GIVEN", 18),
        )


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return cached engine settings."""
    return EngineSettings.from_env()


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""
    get_settings.cache_clear()
