"""Robot identity: team-scoped keys, robot kinds and arena slot handles."""

from robotsim.core.identity.models import RobotKey, RobotKind, SlotId

__all__ = [
    "RobotKey",
    "RobotKind",
    "SlotId",
]
