"""Robot models: the Infantry/Engineer variant and its value types.

A robot is one of two slotted dataclasses sharing the same attribute set.
Each carries its kind as a class attribute, so dispatch is an isinstance check
rather than a downcast.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from robotsim.core.identity import RobotKey, RobotKind

MAX_LEVEL = 3
"""Highest Infantry level reachable through upgrades."""


@dataclass(slots=True, frozen=True)
class Capacity:
    """Attribute caps for a kind/level pair."""

    max_health: int
    max_heat: int


@dataclass(slots=True, frozen=True)
class Vitals:
    """Result of a reset: caps plus freshly restored health and heat."""

    max_health: int
    max_heat: int
    health: int
    heat: int = 0


@dataclass(slots=True)
class Infantry:
    """Combat robot that builds heat and can be upgraded to level 3."""

    kind: ClassVar[RobotKind] = RobotKind.INFANTRY

    team_id: int
    robot_id: int
    health: int = 0
    heat: int = 0
    max_health: int = 0
    max_heat: int = 0
    level: int = 1

    @property
    def key(self) -> RobotKey:
        return RobotKey(self.team_id, self.robot_id)


@dataclass(slots=True)
class Engineer:
    """Support robot with a fixed 300 health cap and no heat."""

    kind: ClassVar[RobotKind] = RobotKind.ENGINEER

    team_id: int
    robot_id: int
    health: int = 0
    heat: int = 0
    max_health: int = 0
    max_heat: int = 0

    @property
    def key(self) -> RobotKey:
        return RobotKey(self.team_id, self.robot_id)


type Robot = Infantry | Engineer
