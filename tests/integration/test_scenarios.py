"""End-to-end scenarios: text stream in, destruction lines out."""

import io

import pytest
from loguru import logger

from robotsim import SimulationSettings, World
from robotsim.cli import main
from robotsim.stream import read_commands, write_events


@pytest.fixture(autouse=True)
def quiet_logging():
    """The CLI installs a stderr sink; drop it so later tests start clean."""
    yield
    logger.remove()
    logger.disable("robotsim")


def _simulate(text: str) -> str:
    world = World(settings=SimulationSettings(start_time=0))
    out = io.StringIO()
    write_events(world.run(read_commands(io.StringIO(text))), out)
    return out.getvalue()


def test_overheat_scenario_step_by_step():
    """Heat decays lazily; overheat damage equals the elapsed time."""
    world = World(settings=SimulationSettings(start_time=0))
    stream = io.StringIO("4\n0 A 1 1 0\n50 H 1 1 150\n80 H 1 1 0\n181 H 1 1 0\n")
    commands = list(read_commands(stream))

    assert world.apply(commands[0]) == []
    assert world.apply(commands[1]) == []
    assert world.get_copy(1, 1).heat == 150

    assert world.apply(commands[2]) == []
    robot = world.get_copy(1, 1)
    assert (robot.heat, robot.health) == (120, 70)

    # 120 - 101 = 19 is under the cap, so no further damage
    assert world.apply(commands[3]) == []
    robot = world.get_copy(1, 1)
    assert (robot.heat, robot.health) == (19, 70)


def test_overheat_until_destroyed():
    text = "4\n0 A 1 1 0\n50 H 1 1 300\n80 H 1 1 0\n150 F 1 1 0\n"

    assert _simulate(text) == "D 1 1\n"


def test_decay_and_damage_deaths_in_processing_order():
    text = (
        "7\n"
        "0 A 1 1 0\n"
        "0 A 2 1 1\n"
        "0 A 1 2 0\n"
        "10 H 1 2 500\n"
        "10 H 1 1 500\n"
        "110 F 2 1 300\n"
        "120 F 1 1 1\n"
    )

    # t=110: both infantry die of overheat (insertion order), then the engineer is shot
    assert _simulate(text) == "D 1 1\nD 1 2\nD 2 1\n"


def test_revival_and_upgrade_flow():
    text = (
        "8\n"
        "0 A 3 3 0\n"
        "1 U 3 3 3\n"
        "2 F 3 3 250\n"
        "3 A 3 3 0\n"
        "4 F 3 3 249\n"
        "5 U 3 3 3\n"
        "6 F 3 3 1\n"
        "7 A 3 3 1\n"
    )

    # Revived at level 3 (250 health); the level-3 re-upgrade is rejected
    assert _simulate(text) == "D 3 3\nD 3 3\n"


def test_engineer_ignores_heat_and_upgrade():
    text = "4\n0 A 1 1 1\n1 H 1 1 10000\n2 U 1 1 3\n5000 F 1 1 299\n"

    assert _simulate(text) == ""


def test_garbage_never_stops_processing():
    text = "5\n0 A 1 1 0\n1 Z 9 9 9\n2 F x 1 5\n3 A 1 1 7\n4 F 1 1 100\n"

    assert _simulate(text) == "D 1 1\n"


def test_cli_reads_file_and_prints_lines(tmp_path, capsys):
    path = tmp_path / "commands.txt"
    path.write_text("3\n0 A 1 1 0\n0 A 1 2 1\n5 F 1 1 100\n", encoding="utf-8")

    assert main([str(path)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "D 1 1\n"


def test_cli_logs_to_stderr_at_requested_level(tmp_path, capsys):
    path = tmp_path / "commands.txt"
    path.write_text("2\n0 A 1 1 0\n5 F 1 1 100\n", encoding="utf-8")

    main([str(path), "--log-level", "INFO"])

    captured = capsys.readouterr()
    assert captured.out == "D 1 1\n"
    assert "Destroyed infantry 1/1" in captured.err


def test_cli_start_time_option(tmp_path, capsys):
    path = tmp_path / "commands.txt"
    path.write_text("3\n100 A 1 1 0\n100 H 1 1 300\n200 H 1 1 0\n", encoding="utf-8")

    main([str(path), "--start-time", "100"])

    assert capsys.readouterr().out == "D 1 1\n"


def test_cli_rejects_negative_start_time(tmp_path):
    path = tmp_path / "commands.txt"
    path.write_text("0\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main([str(path), "--start-time", "-1"])


def test_cli_reads_stdin_by_default(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 A 7 8 1\n1 F 7 8 300\n"))

    assert main([]) == 0

    assert capsys.readouterr().out == "D 7 8\n"
