"""Core functionalities: stateless models and pure operations.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For stateful services, see storage/ and world/.
"""

from robotsim.core.command import Command, CommandKind, DestructionEvent
from robotsim.core.identity import RobotKey, RobotKind, SlotId
from robotsim.core.robot import (
    MAX_LEVEL,
    Capacity,
    Engineer,
    Infantry,
    Robot,
    Vitals,
    can_upgrade,
    capacity,
    decay,
    is_dead,
    reset,
    upgrade,
)
from robotsim.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "RobotKey",
    "RobotKind",
    "SlotId",
    # Robot
    "Robot",
    "Infantry",
    "Engineer",
    "Capacity",
    "Vitals",
    "MAX_LEVEL",
    "capacity",
    "reset",
    "can_upgrade",
    "upgrade",
    "decay",
    "is_dead",
    # Command
    "Command",
    "CommandKind",
    "DestructionEvent",
]
