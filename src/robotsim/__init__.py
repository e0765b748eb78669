"""robotsim: health and heat simulation for a population of combat robots.

Usage:
    from robotsim import Command, CommandKind, RobotKind, World

    world = World()
    commands = [
        Command.of(0, CommandKind.ADD, 1, 1, RobotKind.INFANTRY),
        Command.of(50, CommandKind.HEAT, 1, 1, 300),
        Command.of(150, CommandKind.DAMAGE, 1, 1, 0),
    ]
    for event in world.run(commands):
        print(f"D {event.team_id} {event.robot_id}")  # D 1 1
"""

from loguru import logger

__version__ = "0.1.0"

# Core primitives
from robotsim.core import (
    MAX_LEVEL,
    Capacity,
    Command,
    CommandKind,
    Copy,
    DestructionEvent,
    Engineer,
    Infantry,
    Robot,
    RobotKey,
    RobotKind,
    SlotId,
    Vitals,
    can_upgrade,
    capacity,
    decay,
    is_dead,
    reset,
    upgrade,
)

# Configuration
from robotsim.config import SimulationSettings

# Storage
from robotsim.storage import (
    LocalStorage,
    SlotAllocator,
    Storage,
)

# Engine
from robotsim.world import World

# Library code stays quiet unless the application calls configure_logging()
logger.disable("robotsim")

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "RobotKey",
    "RobotKind",
    "SlotId",
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
    "Command",
    "CommandKind",
    "DestructionEvent",
    # Config
    "SimulationSettings",
    # Storage
    "Storage",
    "LocalStorage",
    "SlotAllocator",
    # World
    "World",
]
