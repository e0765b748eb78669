"""Configuration module using Pydantic Settings.

Usage:
    from robotsim.config import SimulationSettings

    settings = SimulationSettings(start_time=0, log_level="INFO")
"""

from robotsim.config.settings import SimulationSettings

__all__ = [
    "SimulationSettings",
]
