"""Command stream models.

Usage:
    command = Command(timestamp=50, tag="H", operand1=1, operand2=1, operand3=150)
    command.kind  # CommandKind.HEAT
    command.key   # RobotKey(team_id=1, robot_id=1)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from robotsim.core.identity import RobotKey


class CommandKind(Enum):
    """Commands understood by the engine, keyed by their single-letter tag."""

    ADD = "A"  # operand3 = robot kind code
    DAMAGE = "F"  # operand3 = damage amount
    HEAT = "H"  # operand3 = heat amount
    UPGRADE = "U"  # operand3 = target level

    @classmethod
    def from_tag(cls, tag: str) -> CommandKind | None:
        """Map a tag to a command kind, or None if the tag is unknown."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Command:
    """One timestamped record of the command stream.

    The tag is kept verbatim so that records with unknown tags still advance
    simulated time before being ignored.

    Attributes:
        timestamp: Simulated time of the command. Non-decreasing across the stream.
        tag: Command tag ("A", "F", "H" or "U" for known commands).
        operand1: Team id.
        operand2: Robot id.
        operand3: Kind code, damage, heat or target level depending on the tag.
    """

    timestamp: int
    tag: str
    operand1: int = 0
    operand2: int = 0
    operand3: int = 0

    @classmethod
    def of(
        cls, timestamp: int, kind: CommandKind, team_id: int, robot_id: int, value: int
    ) -> Command:
        """Build a command from a known kind."""
        return cls(timestamp, kind.value, team_id, robot_id, value)

    @property
    def kind(self) -> CommandKind | None:
        return CommandKind.from_tag(self.tag)

    @property
    def key(self) -> RobotKey:
        return RobotKey(self.operand1, self.operand2)


@dataclass(frozen=True, slots=True)
class DestructionEvent:
    """A robot's health reached zero at ``timestamp``."""

    team_id: int
    robot_id: int
    timestamp: int = 0

    @property
    def key(self) -> RobotKey:
        return RobotKey(self.team_id, self.robot_id)
