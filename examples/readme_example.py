"""Walkthrough of the World API: overheating, revival and upgrades."""

from robotsim import Command, CommandKind, RobotKind, SimulationSettings, World
from robotsim.logging_utils import configure_logging
from robotsim.stream import format_event


def show(world: World, team_id: int, robot_id: int) -> None:
    robot = world.get_copy(team_id, robot_id)
    if robot is None:
        print(f"  robot {team_id}/{robot_id}: destroyed")
        return
    level = getattr(robot, "level", "-")
    print(
        f"  robot {team_id}/{robot_id}: {robot.kind.name.lower()} level={level} "
        f"health={robot.health}/{robot.max_health} heat={robot.heat}/{robot.max_heat}"
    )


def main() -> None:
    settings = SimulationSettings(log_level="INFO")
    configure_logging(settings)
    world = World(settings=settings, on_destroyed=lambda e: print(format_event(e)))

    commands = [
        Command.of(0, CommandKind.ADD, 1, 1, RobotKind.INFANTRY),
        Command.of(0, CommandKind.ADD, 2, 1, RobotKind.ENGINEER),
        Command.of(10, CommandKind.HEAT, 1, 1, 180),
        Command.of(40, CommandKind.UPGRADE, 1, 1, 2),  # resets heat to 0
        Command.of(50, CommandKind.HEAT, 1, 1, 400),
        Command.of(60, CommandKind.HEAT, 2, 1, 400),  # engineers have no heat
        Command.of(200, CommandKind.DAMAGE, 2, 1, 120),
        Command.of(210, CommandKind.ADD, 1, 1, RobotKind.INFANTRY),  # revive at level 2
    ]
    for command in commands:
        world.apply(command)
        print(f"t={command.timestamp} {command.kind.name}")
        show(world, 1, 1)
        show(world, 2, 1)


if __name__ == "__main__":
    main()
