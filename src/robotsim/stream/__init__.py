"""Text command stream: reader for the input format, writer for destruction lines."""

from robotsim.stream.reader import RecordError, parse_record, read_commands, tokenize
from robotsim.stream.writer import format_event, write_events

__all__ = [
    "RecordError",
    "tokenize",
    "parse_record",
    "read_commands",
    "format_event",
    "write_events",
]
