"""Configuration module using Pydantic Settings.

Provides typed simulation configuration with environment variable support.

Usage:
    from sparselife.config import LifeSettings

    settings = LifeSettings(coordinate_bits=32)
    engine = GenerationEngine(settings.engine_config())
"""

from sparselife.config.settings import LifeSettings

__all__ = [
    "LifeSettings",
]
