"""Unit tests for the LocalStorage registry.

Critical Invariants:
- A robot is in exactly one of live/dead
- Live iteration follows insertion order
- Revival purges every dead entry for the key
- Read accessors hand out copies unless copy=False
"""

import pytest

from robotsim.core.identity import RobotKey, RobotKind
from robotsim.core.robot import Engineer, Infantry, new_robot
from robotsim.storage.local import LocalStorage


def _infantry(team: int, robot: int) -> Infantry:
    return new_robot(RobotKey(team, robot), RobotKind.INFANTRY)


def _engineer(team: int, robot: int) -> Engineer:
    return new_robot(RobotKey(team, robot), RobotKind.ENGINEER)


def test_insert_and_get_live(storage):
    robot = _infantry(1, 1)
    storage.insert(robot)

    assert storage.get_live(RobotKey(1, 1), copy=False) is robot
    assert storage.live_count == 1
    assert storage.dead_count == 0


def test_insert_rejects_second_live_robot_with_same_key(storage):
    """Key alone is unique in the live set, whatever the kind."""
    storage.insert(_infantry(1, 1))

    with pytest.raises(ValueError, match="already live"):
        storage.insert(_engineer(1, 1))


def test_get_live_returns_copy_by_default(storage):
    storage.insert(_infantry(1, 1))

    copy_value = storage.get_live(RobotKey(1, 1))
    copy_value.health = 1

    assert storage.get_live(RobotKey(1, 1), copy=False).health == 100


def test_live_robots_in_insertion_order(storage):
    for robot_id in (3, 1, 2):
        storage.insert(_infantry(1, robot_id))

    assert [r.robot_id for r in storage.live_robots()] == [3, 1, 2]


def test_mark_dead_moves_robot(storage):
    robot = _infantry(1, 1)
    storage.insert(robot)

    moved = storage.mark_dead(RobotKey(1, 1))

    assert moved is robot
    assert storage.get_live(RobotKey(1, 1)) is None
    assert storage.get_dead(RobotKey(1, 1), RobotKind.INFANTRY, copy=False) is robot
    assert storage.get_dead(RobotKey(1, 1), RobotKind.ENGINEER) is None
    assert (storage.live_count, storage.dead_count) == (0, 1)


def test_mark_dead_requires_live_robot(storage):
    with pytest.raises(ValueError, match="is not live"):
        storage.mark_dead(RobotKey(1, 1))


def test_mark_dead_while_iterating_live(storage):
    """Iteration runs over a snapshot, so robots can die mid-iteration."""
    for robot_id in range(4):
        storage.insert(_infantry(1, robot_id))

    visited = []
    for robot in storage.live_robots(copy=False):
        visited.append(robot.robot_id)
        if robot.robot_id % 2 == 0:
            storage.mark_dead(robot.key)

    assert visited == [0, 1, 2, 3]
    assert [r.robot_id for r in storage.live_robots()] == [1, 3]
    assert [r.robot_id for r in storage.dead_robots()] == [0, 2]


def test_revive_reuses_instance_and_appends_to_live(storage):
    first = _infantry(1, 1)
    storage.insert(first)
    storage.insert(_infantry(1, 2))
    storage.mark_dead(RobotKey(1, 1))

    revived = storage.revive(RobotKey(1, 1), RobotKind.INFANTRY)

    assert revived is first
    assert storage.dead_count == 0
    assert [r.robot_id for r in storage.live_robots()] == [2, 1]


def test_revive_requires_matching_kind(storage):
    storage.insert(_infantry(1, 1))
    storage.mark_dead(RobotKey(1, 1))

    assert storage.revive(RobotKey(1, 1), RobotKind.ENGINEER) is None
    assert storage.dead_count == 1


def test_revive_purges_dead_entries_of_other_kinds(storage):
    storage.insert(_engineer(1, 1))
    storage.mark_dead(RobotKey(1, 1))
    storage.insert(_infantry(1, 1))
    storage.mark_dead(RobotKey(1, 1))
    assert storage.dead_count == 2

    storage.revive(RobotKey(1, 1), RobotKind.INFANTRY)

    assert storage.dead_count == 0
    assert storage.get_dead(RobotKey(1, 1), RobotKind.ENGINEER) is None
    assert isinstance(storage.get_live(RobotKey(1, 1)), Infantry)


def test_purge_dead_only_touches_matching_key(storage):
    storage.insert(_infantry(1, 1))
    storage.insert(_infantry(2, 1))
    storage.mark_dead(RobotKey(1, 1))
    storage.mark_dead(RobotKey(2, 1))

    assert storage.purge_dead(RobotKey(1, 1)) == 1
    assert storage.purge_dead(RobotKey(1, 1)) == 0
    assert storage.get_dead(RobotKey(2, 1), RobotKind.INFANTRY) is not None


def test_purged_slot_handle_goes_stale(storage):
    """CRITICAL: a purged robot's handle must not resolve to its slot's next owner."""
    old_slot = storage.insert(_infantry(1, 1))
    storage.mark_dead(RobotKey(1, 1))
    storage.purge_dead(RobotKey(1, 1))

    new_slot = storage.insert(_engineer(5, 5))

    assert new_slot.index == old_slot.index
    assert storage.get_by_slot(old_slot) is None
    assert storage.get_by_slot(new_slot).robot_id == 5


def test_slot_survives_death_and_revival(storage):
    slot = storage.insert(_infantry(1, 1))
    storage.mark_dead(RobotKey(1, 1))
    assert storage.get_by_slot(slot) is not None

    storage.revive(RobotKey(1, 1), RobotKind.INFANTRY)

    assert storage.get_by_slot(slot, copy=False) is storage.get_live(RobotKey(1, 1), copy=False)


def test_live_and_dead_sets_stay_disjoint(storage):
    storage.insert(_infantry(1, 1))
    storage.mark_dead(RobotKey(1, 1))
    storage.revive(RobotKey(1, 1), RobotKind.INFANTRY)
    storage.mark_dead(RobotKey(1, 1))

    live_keys = {r.key for r in storage.live_robots()}
    dead_keys = {r.key for r in storage.dead_robots()}

    assert live_keys.isdisjoint(dead_keys)
    assert storage.dead_count == 1
