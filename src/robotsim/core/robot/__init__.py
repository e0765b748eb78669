"""Robot entity model: variant types, capacity table and pure operations."""

from robotsim.core.robot.models import (
    MAX_LEVEL,
    Capacity,
    Engineer,
    Infantry,
    Robot,
    Vitals,
)
from robotsim.core.robot.operations import (
    ENGINEER_CAPACITY,
    INFANTRY_CAPACITY,
    apply_reset,
    can_upgrade,
    capacity,
    damage,
    decay,
    is_dead,
    new_robot,
    reset,
    upgrade,
)

__all__ = [
    # Models
    "Robot",
    "Infantry",
    "Engineer",
    "Capacity",
    "Vitals",
    "MAX_LEVEL",
    # Operations
    "INFANTRY_CAPACITY",
    "ENGINEER_CAPACITY",
    "capacity",
    "reset",
    "can_upgrade",
    "upgrade",
    "decay",
    "damage",
    "is_dead",
    "new_robot",
    "apply_reset",
]
