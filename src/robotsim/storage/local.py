"""Local in-memory registry implementation.

A single arena owns every robot. Live and dead membership are two index sets
over that arena, so a robot always has exactly one home.

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator

from robotsim.core.identity import RobotKey, RobotKind, SlotId
from robotsim.core.robot import Robot
from robotsim.core.types import Copy
from robotsim.storage.allocator import SlotAllocator


class LocalStorage:
    """Dict-based robot registry.

    Structure:
        _arena[slot.index] = robot
        _live[key] = slot                (insertion ordered)
        _dead[(key, kind)] = slot        (ordered by destruction)
    """

    def __init__(self) -> None:
        self._allocator = SlotAllocator()
        self._arena: dict[int, Robot] = {}
        self._live: dict[RobotKey, SlotId] = {}
        self._dead: dict[tuple[RobotKey, RobotKind], SlotId] = {}

    def _resolve(self, slot: SlotId, copy: bool) -> Copy[Robot] | Robot:
        robot = self._arena[slot.index]
        return cp.deepcopy(robot) if copy else robot

    def _release(self, slot: SlotId) -> None:
        del self._arena[slot.index]
        self._allocator.deallocate(slot)

    def insert(self, robot: Robot) -> SlotId:
        """Store a new robot at the end of the live set.

        Args:
            robot: Robot instance. The registry takes ownership of it.

        Returns:
            Arena handle of the stored robot.

        Raises:
            ValueError: If a live robot already holds the same key.
        """
        if robot.key in self._live:
            raise ValueError(f"Robot {robot.key} is already live")
        slot = self._allocator.allocate()
        self._arena[slot.index] = robot
        self._live[robot.key] = slot
        return slot

    def get_live(self, key: RobotKey, copy: bool = True) -> Copy[Robot] | Robot | None:
        """Get the live robot holding a key.

        Args:
            key: Team and robot id.
            copy: Whether to return a deep copy (default True).

        Returns:
            Robot, or None if no live robot holds the key.
        """
        slot = self._live.get(key)
        if slot is None:
            return None
        return self._resolve(slot, copy)

    def get_dead(
        self, key: RobotKey, kind: RobotKind, copy: bool = True
    ) -> Copy[Robot] | Robot | None:
        """Get the dead robot matching a key and kind.

        Args:
            key: Team and robot id.
            kind: Robot kind.
            copy: Whether to return a deep copy (default True).

        Returns:
            Robot, or None if no such robot is dead.
        """
        slot = self._dead.get((key, kind))
        if slot is None:
            return None
        return self._resolve(slot, copy)

    def get_by_slot(self, slot: SlotId, copy: bool = True) -> Copy[Robot] | Robot | None:
        """Resolve an arena handle.

        Returns:
            Robot, or None if the handle was released or its slot recycled.
        """
        if not self._allocator.is_alive(slot) or slot.index not in self._arena:
            return None
        return self._resolve(slot, copy)

    def live_robots(self, copy: bool = True) -> Iterator[Robot]:
        """Iterate live robots in insertion order.

        Iterates over a snapshot of the live index, so robots may be marked dead
        while iterating with ``copy=False``.
        """
        for slot in list(self._live.values()):
            yield self._resolve(slot, copy)

    def dead_robots(self, copy: bool = True) -> Iterator[Robot]:
        """Iterate dead robots in order of destruction."""
        for slot in list(self._dead.values()):
            yield self._resolve(slot, copy)

    def mark_dead(self, key: RobotKey) -> Robot:
        """Move a live robot to the dead set.

        Args:
            key: Key of the live robot.

        Returns:
            The robot (by reference).

        Raises:
            ValueError: If no live robot holds the key.
        """
        slot = self._live.pop(key, None)
        if slot is None:
            raise ValueError(f"Robot {key} is not live")
        robot = self._arena[slot.index]
        stale = self._dead.pop((key, robot.kind), None)
        if stale is not None:
            self._release(stale)
        self._dead[(key, robot.kind)] = slot
        return robot

    def revive(self, key: RobotKey, kind: RobotKind) -> Robot | None:
        """Move a dead robot back to the end of the live set.

        Every other dead entry holding the same key is purged, whatever its kind.
        The revived instance is returned by reference and is not reset here.

        Args:
            key: Team and robot id.
            kind: Kind the dead robot must have.

        Returns:
            The revived robot, or None if no dead robot matches or the key is live.
        """
        if key in self._live:
            return None
        slot = self._dead.pop((key, kind), None)
        if slot is None:
            return None
        self.purge_dead(key)
        self._live[key] = slot
        return self._arena[slot.index]

    def purge_dead(self, key: RobotKey) -> int:
        """Drop every dead robot holding a key and release their slots.

        Returns:
            Number of dead robots dropped.
        """
        stale = [dead_key for dead_key in self._dead if dead_key[0] == key]
        for dead_key in stale:
            self._release(self._dead.pop(dead_key))
        return len(stale)

    @property
    def live_count(self) -> int:
        return len(self._live)

    @property
    def dead_count(self) -> int:
        return len(self._dead)
