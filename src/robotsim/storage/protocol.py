"""Storage protocol for the robot registry.

The registry owns every robot instance. A robot lives in exactly one of two
index sets: live (keyed by RobotKey, in insertion order) or dead (keyed by
RobotKey and RobotKind).

Usage:
    storage = LocalStorage()
    world = World(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from robotsim.core.identity import RobotKey, RobotKind, SlotId
from robotsim.core.robot import Robot


class Storage(Protocol):
    """Abstract registry interface. Implementations own the robot instances."""

    def insert(self, robot: Robot) -> SlotId:
        """Store a new robot in the live set."""
        ...

    def get_live(self, key: RobotKey, copy: bool = True) -> Robot | None:
        """Get the live robot holding ``key``."""
        ...

    def get_dead(self, key: RobotKey, kind: RobotKind, copy: bool = True) -> Robot | None:
        """Get the dead robot matching ``key`` and ``kind``."""
        ...

    def get_by_slot(self, slot: SlotId, copy: bool = True) -> Robot | None:
        """Resolve an arena handle, or None if it is stale."""
        ...

    def live_robots(self, copy: bool = True) -> Iterator[Robot]:
        """Iterate live robots in insertion order."""
        ...

    def dead_robots(self, copy: bool = True) -> Iterator[Robot]:
        """Iterate dead robots in order of destruction."""
        ...

    def mark_dead(self, key: RobotKey) -> Robot:
        """Move the live robot holding ``key`` to the dead set."""
        ...

    def revive(self, key: RobotKey, kind: RobotKind) -> Robot | None:
        """Move a matching dead robot back to live, purging other dead entries for ``key``."""
        ...

    def purge_dead(self, key: RobotKey) -> int:
        """Drop every dead robot holding ``key``. Returns how many were dropped."""
        ...

    @property
    def live_count(self) -> int: ...

    @property
    def dead_count(self) -> int: ...
