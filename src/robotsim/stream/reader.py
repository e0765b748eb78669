"""Reader for the whitespace-separated command stream.

Format: the first token is the record count N, followed by N records of five
tokens each: ``time tag team_id robot_id value``. Tokens may be split across
lines arbitrarily.

Usage:
    with open("commands.txt") as f:
        for command in read_commands(f):
            world.apply(command)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TextIO

from loguru import logger

from robotsim.core.command import Command

RECORD_WIDTH = 5


class RecordError(ValueError):
    """Raised when a record's numeric fields are not non-negative integers."""

    pass


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    """Split lines into whitespace-separated tokens."""
    for line in lines:
        yield from line.split()


def _parse_uint(token: str, field: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise RecordError(f"{field} must be an integer, got {token!r}") from None
    if value < 0:
        raise RecordError(f"{field} must be non-negative, got {value}")
    return value


def parse_record(tokens: list[str]) -> Command:
    """Build a command from one five-token record.

    The tag is not validated; unknown tags reach the engine, which advances
    time and ignores them.

    Args:
        tokens: ``[time, tag, operand1, operand2, operand3]``.

    Returns:
        Parsed Command.

    Raises:
        RecordError: If the record is short or a numeric field is invalid.
    """
    if len(tokens) != RECORD_WIDTH:
        raise RecordError(f"Expected {RECORD_WIDTH} tokens, got {len(tokens)}: {tokens}")
    time_token, tag, *operands = tokens
    return Command(
        timestamp=_parse_uint(time_token, "time"),
        tag=tag,
        operand1=_parse_uint(operands[0], "operand1"),
        operand2=_parse_uint(operands[1], "operand2"),
        operand3=_parse_uint(operands[2], "operand3"),
    )


def read_commands(stream: TextIO | Iterable[str]) -> Iterator[Command]:
    """Parse a counted command stream lazily.

    Reading stops after N records or at end of input, whichever comes first.
    Malformed records are logged and skipped.

    Args:
        stream: Text stream or any iterable of lines.

    Yields:
        Commands in stream order.
    """
    tokens = tokenize(stream)
    header = next(tokens, None)
    if header is None:
        return
    try:
        count = _parse_uint(header, "record count")
    except RecordError as e:
        logger.warning(f"Unreadable command stream header: {e}")
        return

    for index in range(count):
        record = list(islice(tokens, RECORD_WIDTH))
        if not record:
            logger.warning(f"Command stream ended after {index} of {count} records")
            return
        try:
            yield parse_record(record)
        except RecordError as e:
            logger.warning(f"Skipping record {index + 1}: {e}")
