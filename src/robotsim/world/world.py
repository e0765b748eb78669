"""World: simulation engine owning the robot registry and simulated time.

Usage:
    world = World()

    # Feed an ordered command stream
    for event in world.run(commands):
        print(format_event(event))

    # Or drive it command by command
    world.add(1, 1, RobotKind.INFANTRY)
    world.heat(1, 1, 150)
    events = world.advance_time(80)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from loguru import logger

from robotsim.config import SimulationSettings
from robotsim.core.command import Command, CommandKind, DestructionEvent
from robotsim.core.identity import RobotKey, RobotKind
from robotsim.core.robot import (
    Infantry,
    Robot,
    apply_reset,
    damage,
    decay,
    is_dead,
    new_robot,
    upgrade,
)
from robotsim.core.types import Copy
from robotsim.storage.local import LocalStorage
from robotsim.storage.protocol import Storage

DestructionSink = Callable[[DestructionEvent], None]


class World:
    """Central simulation state and command processor.

    Owns the registry and the simulated clock. Every command first advances
    time to its own timestamp, so deaths caused by decay are reported before
    the command acts on the robots that are still live.

    Inapplicable commands (unknown robot, dead target, wrong kind, invalid
    upgrade, unknown tag) are ignored. No operation raises on command input.

    Args:
        storage: Registry backend (default: LocalStorage).
        settings: Engine settings (default: loaded from environment).
        on_destroyed: Called with each destruction event as it happens.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        settings: SimulationSettings | None = None,
        on_destroyed: DestructionSink | None = None,
    ):
        self._storage = storage or LocalStorage()
        self._settings = settings or SimulationSettings()
        self._last_time = self._settings.start_time
        self._on_destroyed = on_destroyed
        self._handlers: dict[CommandKind, Callable[[Command], list[DestructionEvent]]] = {
            CommandKind.ADD: self._handle_add,
            CommandKind.DAMAGE: self._handle_damage,
            CommandKind.HEAT: self._handle_heat,
            CommandKind.UPGRADE: self._handle_upgrade,
        }

    @property
    def last_time(self) -> int:
        """Simulated time of the last advancement."""
        return self._last_time

    @property
    def live_count(self) -> int:
        return self._storage.live_count

    @property
    def dead_count(self) -> int:
        return self._storage.dead_count

    # Command stream

    def apply(self, command: Command) -> list[DestructionEvent]:
        """Advance time to the command's timestamp, then dispatch it.

        Args:
            command: Command to process.

        Returns:
            Destruction events in the order they happened: decay deaths first,
            then a death caused by the command itself.
        """
        events = self.advance_time(command.timestamp)
        kind = command.kind
        if kind is None:
            logger.debug(f"Ignoring command with unknown tag {command.tag!r}")
            return events
        events.extend(self._handlers[kind](command))
        return events

    def run(self, commands: Iterable[Command]) -> Iterator[DestructionEvent]:
        """Apply commands in order, yielding events as each command is processed.

        Args:
            commands: Commands ordered by non-decreasing timestamp.

        Yields:
            DestructionEvent for every robot destroyed along the way.
        """
        for command in commands:
            yield from self.apply(command)

    # Time

    def advance_time(self, curr_time: int) -> list[DestructionEvent]:
        """Decay every live robot for the time elapsed since the last advancement.

        Does nothing if ``curr_time`` is not after the current simulated time.

        Args:
            curr_time: New simulated time.

        Returns:
            Events for robots destroyed by overheating, in live insertion order.
        """
        if curr_time <= self._last_time:
            return []
        elapsed = curr_time - self._last_time
        self._last_time = curr_time

        events: list[DestructionEvent] = []
        for robot in self._storage.live_robots(copy=False):
            robot.heat, robot.health = decay(robot.heat, robot.health, robot.max_heat, elapsed)
            if is_dead(robot.health):
                events.append(self._destroy(robot))
        return events

    # Commands

    def add(self, team_id: int, robot_id: int, kind: RobotKind | int) -> None:
        """Create or revive a robot.

        Ignored while a live robot holds the key, whatever its kind. A dead
        robot of the same kind is reset (keeping its level) and revived; any
        other dead robot sharing the key is purged. Otherwise a new robot is
        built, and stale dead entries for the key are purged as well.

        Args:
            team_id: Team id.
            robot_id: Robot id within the team.
            kind: RobotKind or its integer code. Unknown codes are ignored.
        """
        key = RobotKey(team_id, robot_id)
        if self._storage.get_live(key, copy=False) is not None:
            logger.debug(f"Ignoring add for {key}: already live")
            return

        robot_kind = RobotKind.from_code(int(kind))
        if robot_kind is None:
            logger.debug(f"Ignoring add for {key}: unknown robot kind {kind}")
            return

        revived = self._storage.revive(key, robot_kind)
        if revived is not None:
            apply_reset(revived)
            logger.info(f"Revived {robot_kind.name.lower()} {key}")
            return

        purged = self._storage.purge_dead(key)
        self._storage.insert(new_robot(key, robot_kind))
        logger.debug(f"Added {robot_kind.name.lower()} {key} (purged {purged} dead)")

    def damage(self, team_id: int, robot_id: int, amount: int) -> list[DestructionEvent]:
        """Subtract health from a live robot, destroying it at zero.

        Returns:
            A single event if the robot was destroyed, otherwise an empty list.
        """
        key = RobotKey(team_id, robot_id)
        robot = self._storage.get_live(key, copy=False)
        if robot is None or is_dead(robot.health) or amount < 0:
            logger.debug(f"Ignoring damage {amount} for {key}")
            return []
        robot.health = damage(robot.health, amount)
        if is_dead(robot.health):
            return [self._destroy(robot)]
        return []

    def heat(self, team_id: int, robot_id: int, amount: int) -> None:
        """Add heat to a live Infantry. No cap is enforced here.

        Overheating only costs health on the next time advancement.
        """
        key = RobotKey(team_id, robot_id)
        robot = self._storage.get_live(key, copy=False)
        if not isinstance(robot, Infantry) or amount < 0:
            logger.debug(f"Ignoring heat {amount} for {key}")
            return
        robot.heat += amount

    def upgrade(self, team_id: int, robot_id: int, target_level: int) -> None:
        """Raise a live Infantry to ``target_level``, fully resetting it.

        Ignored unless the target is above the current level and at most 3.
        """
        key = RobotKey(team_id, robot_id)
        robot = self._storage.get_live(key, copy=False)
        if not isinstance(robot, Infantry):
            logger.debug(f"Ignoring upgrade for {key}: no live infantry")
            return
        level = upgrade(robot.level, target_level)
        if level == robot.level:
            logger.debug(f"Ignoring upgrade for {key}: level {robot.level} -> {target_level}")
            return
        robot.level = level
        apply_reset(robot)
        logger.debug(f"Upgraded {key} to level {level}")

    # Read access

    def get_copy(self, team_id: int, robot_id: int) -> Copy[Robot] | None:
        """Get a copy of the live robot holding a key.

        Returns a deep copy; modifying it does not affect the simulation.
        """
        return self._storage.get_live(RobotKey(team_id, robot_id), copy=True)

    def get_dead_copy(
        self, team_id: int, robot_id: int, kind: RobotKind
    ) -> Copy[Robot] | None:
        """Get a copy of a dead robot matching a key and kind."""
        return self._storage.get_dead(RobotKey(team_id, robot_id), kind, copy=True)

    def live_copies(self) -> list[Copy[Robot]]:
        """Copies of all live robots in insertion order."""
        return list(self._storage.live_robots(copy=True))

    def dead_copies(self) -> list[Copy[Robot]]:
        """Copies of all dead robots in order of destruction."""
        return list(self._storage.dead_robots(copy=True))

    def is_alive(self, team_id: int, robot_id: int) -> bool:
        return self._storage.get_live(RobotKey(team_id, robot_id), copy=False) is not None

    # Internals

    def _destroy(self, robot: Robot) -> DestructionEvent:
        """Move a robot to the dead set and publish its destruction."""
        self._storage.mark_dead(robot.key)
        event = DestructionEvent(robot.team_id, robot.robot_id, timestamp=self._last_time)
        logger.info(f"Destroyed {robot.kind.name.lower()} {robot.key} at t={self._last_time}")
        if self._on_destroyed is not None:
            self._on_destroyed(event)
        return event

    def _handle_add(self, command: Command) -> list[DestructionEvent]:
        self.add(command.operand1, command.operand2, command.operand3)
        return []

    def _handle_damage(self, command: Command) -> list[DestructionEvent]:
        return self.damage(command.operand1, command.operand2, command.operand3)

    def _handle_heat(self, command: Command) -> list[DestructionEvent]:
        self.heat(command.operand1, command.operand2, command.operand3)
        return []

    def _handle_upgrade(self, command: Command) -> list[DestructionEvent]:
        self.upgrade(command.operand1, command.operand2, command.operand3)
        return []
