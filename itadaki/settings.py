"""
Environment-based engine configuration using pydantic-settings.

Environment variables (prefix: ITADAKI_):
    ITADAKI_STARTING_CASH   - Cash each player starts with (default: 2500)
    ITADAKI_SALARY_BASE     - Fixed part of the bank salary (default: 500)
    ITADAKI_SALARY_PERCENT  - Percent of net worth added to salary (default: 10)
    ITADAKI_CHANCE_MIN      - Lowest Chance delta, inclusive (default: -150)
    ITADAKI_CHANCE_MAX      - Highest Chance delta, inclusive (default: 200)
    ITADAKI_DIE_FACES       - Faces on the die (default: 6)
    ITADAKI_SEED            - Optional RNG seed
    ITADAKI_LOG_LEVEL       - Logging level for the CLI (default: WARNING)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from itadaki.config import GameConfig


class EngineSettings(BaseSettings):
    """Policy constants and runtime options for the engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="ITADAKI_",
    )

    starting_cash: int = Field(default=2500, description="Cash each player starts with.")
    salary_base: int = Field(default=500, ge=0, description="Fixed part of the bank salary.")
    salary_percent: int = Field(default=10, ge=0, description="Percent of net worth added to salary.")
    chance_min: int = Field(default=-150, description="Lowest Chance delta, inclusive.")
    chance_max: int = Field(default=200, description="Highest Chance delta, inclusive.")
    die_faces: int = Field(default=6, ge=1, description="Faces on the die.")
    seed: Optional[int] = Field(default=None, description="RNG seed for reproducible games.")
    log_level: str = Field(default="WARNING", description="Logging level name.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        if not value:
            return "WARNING"
        value = str(value).upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @model_validator(mode="after")
    def check_chance_range(self) -> "EngineSettings":
        if self.chance_min > self.chance_max:
            raise ValueError("chance_min must not exceed chance_max")
        return self

    def to_game_config(self, seed: Optional[int] = None) -> GameConfig:
        """Build a GameConfig, letting an explicit seed override the environment."""
        return GameConfig(
            starting_cash=self.starting_cash,
            salary_base=self.salary_base,
            salary_percent=self.salary_percent,
            chance_min=self.chance_min,
            chance_max=self.chance_max,
            die_faces=self.die_faces,
            seed=seed if seed is not None else self.seed,
        )


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Return cached engine settings instance."""
    return EngineSettings()
