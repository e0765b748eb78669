"""Command stream types: commands in, destruction events out."""

from robotsim.core.command.models import Command, CommandKind, DestructionEvent

__all__ = [
    "Command",
    "CommandKind",
    "DestructionEvent",
]
