"""Robot identity models.

Usage:
    key = RobotKey(team_id=1, robot_id=7)
    kind = RobotKind.from_code(0)  # RobotKind.INFANTRY
    slot = SlotId(index=3, generation=1)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class RobotKind(IntEnum):
    """Robot variants, numbered as they appear in the command stream."""

    INFANTRY = 0
    ENGINEER = 1

    @classmethod
    def from_code(cls, code: int) -> RobotKind | None:
        """Map a wire code to a kind.

        Args:
            code: Integer kind code (0 = Infantry, 1 = Engineer).

        Returns:
            Matching RobotKind, or None for an unknown code.
        """
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class RobotKey:
    """Identity of a robot within the live set.

    Not unique across kinds: a dead Infantry and a dead Engineer may share a key.
    """

    team_id: int
    robot_id: int

    def __str__(self) -> str:
        return f"{self.team_id}/{self.robot_id}"


@dataclass(frozen=True, slots=True)
class SlotId:
    """Handle into the robot arena with generation for safe slot reuse."""

    index: int = 0
    generation: int = 0
