"""
Pytest configuration and shared fixtures for robotsim tests.
"""

import os
import sys

import pytest

# Add the parent directory to Python path so we can import the package uninstalled
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from robotsim.server.command_registry import discover_commands
from robotsim.server.simulator import RobotSimulator


@pytest.fixture(scope="session", autouse=True)
def registered_commands():
    """Make sure every command module has been imported once per session."""
    discover_commands()


@pytest.fixture
def sim() -> RobotSimulator:
    """Fresh 6x6 simulator, robot not placed."""
    return RobotSimulator(grid_size=6)


@pytest.fixture
def placed_sim(sim: RobotSimulator) -> RobotSimulator:
    """Simulator with the robot at 2,2 facing NORTH."""
    outcome = sim.process("PLACE 2,2,NORTH")
    assert outcome.success, outcome.message
    return sim
