"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from robotsim.config import SimulationSettings

    # Load from environment variables (ROBOTSIM_*)
    settings = SimulationSettings()

    # Or override with explicit values
    settings = SimulationSettings(log_level="DEBUG")
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


class SimulationSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the simulation engine and its command-line runner.

    Attributes:
        start_time: Simulated time the engine starts at. Decay for the first
            command is measured from here.
        log_level: Minimum loguru level written to stderr.
        log_format: loguru format string for the stderr sink.

    Environment Variables:
        ROBOTSIM_START_TIME
        ROBOTSIM_LOG_LEVEL
        ROBOTSIM_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="ROBOTSIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start_time: int = Field(default=0, ge=0)
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
