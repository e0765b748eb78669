"""Writer for destruction lines: ``D <team_id> <robot_id>``."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from robotsim.core.command import DestructionEvent


def format_event(event: DestructionEvent) -> str:
    return f"D {event.team_id} {event.robot_id}"


def write_events(events: Iterable[DestructionEvent], out: TextIO) -> int:
    """Write one line per event, flushing after each so output is never held back.

    Args:
        events: Events in processing order. May be a lazy iterator.
        out: Destination stream.

    Returns:
        Number of lines written.
    """
    written = 0
    for event in events:
        out.write(format_event(event) + "\n")
        out.flush()
        written += 1
    return written
