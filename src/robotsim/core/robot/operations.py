"""Pure functions for the robot entity model.

These are stateless functions over plain integers, plus two helpers that apply
them to robot instances. Health and heat never go below zero: every decrement
clamps at 0.
"""

from __future__ import annotations

from robotsim.core.identity import RobotKey, RobotKind
from robotsim.core.robot.models import MAX_LEVEL, Capacity, Engineer, Infantry, Robot, Vitals

INFANTRY_CAPACITY: dict[int, Capacity] = {
    1: Capacity(max_health=100, max_heat=100),
    2: Capacity(max_health=150, max_heat=200),
    3: Capacity(max_health=250, max_heat=300),
}
ENGINEER_CAPACITY = Capacity(max_health=300, max_heat=0)
_FALLBACK_CAPACITY = INFANTRY_CAPACITY[1]


# Capacity and reset


def capacity(kind: RobotKind, level: int = 1) -> Capacity:
    """Look up attribute caps for a kind and level.

    Args:
        kind: Robot kind.
        level: Infantry level. Ignored for Engineers.

    Returns:
        Capacity for the pair. Infantry levels outside 1..3 fall back to level 1 caps.
    """
    if kind is RobotKind.ENGINEER:
        return ENGINEER_CAPACITY
    return INFANTRY_CAPACITY.get(level, _FALLBACK_CAPACITY)


def reset(kind: RobotKind, level: int = 1) -> Vitals:
    """Compute fully restored vitals: health at its cap, heat at zero."""
    cap = capacity(kind, level)
    return Vitals(max_health=cap.max_health, max_heat=cap.max_heat, health=cap.max_health)


# Upgrade


def can_upgrade(level: int, target_level: int) -> bool:
    """Check whether an Infantry at ``level`` may move to ``target_level``."""
    return level < target_level <= MAX_LEVEL


def upgrade(level: int, target_level: int) -> int:
    """Return the level after an upgrade attempt.

    Args:
        level: Current level.
        target_level: Requested level.

    Returns:
        target_level if it is above the current level and at most MAX_LEVEL,
        otherwise the unchanged level.
    """
    return target_level if can_upgrade(level, target_level) else level


# Time and damage


def decay(heat: int, health: int, max_heat: int, elapsed: int) -> tuple[int, int]:
    """Cool down over ``elapsed`` time units and apply overheat damage.

    Heat drops by ``elapsed``. If the remaining heat is still above ``max_heat``
    the robot loses ``elapsed`` health as well.

    Args:
        heat: Current heat.
        health: Current health.
        max_heat: Heat cap.
        elapsed: Time since the last advancement.

    Returns:
        (heat, health) after decay.

    Example:
        >>> decay(heat=150, health=80, max_heat=100, elapsed=30)
        (120, 50)
    """
    heat = max(heat - elapsed, 0)
    if heat > max_heat:
        health = max(health - elapsed, 0)
    return heat, health


def damage(health: int, amount: int) -> int:
    """Subtract ``amount`` from health, clamped at zero."""
    return max(health - amount, 0)


def is_dead(health: int) -> bool:
    return health == 0


# Robot helpers


def new_robot(key: RobotKey, kind: RobotKind) -> Robot:
    """Build a fully reset robot of ``kind``. Infantry start at level 1.

    Args:
        key: Team and robot id.
        kind: Which variant to build.

    Returns:
        New Infantry or Engineer at full health.
    """
    robot: Robot
    if kind is RobotKind.ENGINEER:
        robot = Engineer(team_id=key.team_id, robot_id=key.robot_id)
    else:
        robot = Infantry(team_id=key.team_id, robot_id=key.robot_id)
    apply_reset(robot)
    return robot


def apply_reset(robot: Robot) -> None:
    """Re-derive caps from the robot's current level and restore health and heat.

    The level itself is kept.
    """
    level = robot.level if isinstance(robot, Infantry) else 1
    vitals = reset(robot.kind, level)
    robot.max_health = vitals.max_health
    robot.max_heat = vitals.max_heat
    robot.health = vitals.health
    robot.heat = vitals.heat
