"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from robotsim import LocalStorage, RobotKind, SimulationSettings, World


@pytest.fixture
def settings():
    """Settings pinned to defaults, independent of ROBOTSIM_* variables."""
    return SimulationSettings(start_time=0, log_level="WARNING")


@pytest.fixture
def storage():
    """Fresh LocalStorage instance."""
    return LocalStorage()


@pytest.fixture
def world(storage, settings):
    """Fresh World at t=0."""
    return World(storage=storage, settings=settings)


@pytest.fixture
def infantry(world):
    """World holding one level-1 Infantry, team 1 robot 1."""
    world.add(1, 1, RobotKind.INFANTRY)
    return world
