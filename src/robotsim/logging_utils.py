"""Logging setup for robotsim.

The library logs through loguru and stays silent until an application opts in:
``robotsim/__init__.py`` disables the ``robotsim`` namespace on import, and
``configure_logging`` re-enables it with a single stderr sink.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from robotsim.config import SimulationSettings


def configure_logging(
    settings: SimulationSettings | None = None, sink: TextIO | None = None
) -> int:
    """Install a stderr sink at the configured level and enable library logs.

    Removes loguru's default handler first, so calling this twice does not
    duplicate output.

    Args:
        settings: Source of level and format (default: loaded from environment).
        sink: Stream to write to (default: sys.stderr).

    Returns:
        loguru handler id of the installed sink.
    """
    settings = settings or SimulationSettings()
    logger.remove()
    handler_id = logger.add(
        sink or sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
    )
    logger.enable("robotsim")
    return handler_id
