"""Configuration settings using Pydantic Settings.

Usage:
    from sparselife.config import LifeSettings

    # Load from environment variables (LIFE_*)
    settings = LifeSettings()

    # Or override with explicit values
    settings = LifeSettings(coordinate_bits=32, history_limit=0)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sparselife.core.coordinates import CoordinateSpace
from sparselife.world.engine import EngineConfig

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LifeSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for simulations.

    Attributes:
        coordinate_bits: Width of each coordinate axis. Boards wrap at the edges
            of this signed range.
        counter_bits: Width of the neighbor counter used during a step.
        history_limit: Generations kept by the in-memory history (0 disables it).
        log_level: Root log level applied by the command line runner.

    Environment Variables:
        LIFE_COORDINATE_BITS
        LIFE_COUNTER_BITS
        LIFE_HISTORY_LIMIT
        LIFE_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="LIFE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    coordinate_bits: int = Field(default=16, ge=2, le=64)
    counter_bits: int = Field(default=8, ge=1, le=64)
    history_limit: int = Field(default=64, ge=0)
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    def coordinate_space(self) -> CoordinateSpace:
        return CoordinateSpace(bits=self.coordinate_bits)

    def engine_config(self) -> EngineConfig:
        return EngineConfig(counter_bits=self.counter_bits)
