"""Command-line runner: reads a command stream, prints destruction lines.

Usage:
    robotsim commands.txt
    robotsim < commands.txt
    python -m robotsim --log-level DEBUG commands.txt
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from loguru import logger

from robotsim.config import SimulationSettings
from robotsim.logging_utils import configure_logging
from robotsim.stream import read_commands, write_events
from robotsim.world import World


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robotsim",
        description="Simulate robot health and heat under a timestamped command stream.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default="-",
        help="Command stream file (default: stdin)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr output (overrides ROBOTSIM_LOG_LEVEL)",
    )
    parser.add_argument(
        "--start-time",
        type=int,
        default=None,
        help="Initial simulated time (overrides ROBOTSIM_START_TIME)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation over a command stream.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:]).

    Returns:
        Process exit code. Always 0: bad records are skipped, not fatal.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.start_time is not None and args.start_time < 0:
        parser.error("--start-time must be non-negative")

    overrides: dict[str, object] = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.start_time is not None:
        overrides["start_time"] = args.start_time
    settings = SimulationSettings(**overrides)
    configure_logging(settings)

    world = World(settings=settings)
    with args.input as stream:
        written = write_events(world.run(read_commands(stream)), sys.stdout)

    logger.info(
        f"Processed stream up to t={world.last_time}: {written} destroyed, "
        f"{world.live_count} live, {world.dead_count} dead"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
