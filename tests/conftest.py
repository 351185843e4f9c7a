"""Pytest fixtures for all tests."""

import io

import pytest

from config import DisplayConfig, SimulationConfig
from simulation.engine import LifeEngine
from simulation.grid import Grid
from simulation.life import Simulation

GLIDER = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]


@pytest.fixture
def grid():
    """Create an empty 5x5 grid."""
    return Grid(5, 5)


@pytest.fixture
def blinker():
    """Vertical blinker centred on a 5x5 torus."""
    return Simulation.from_cells(5, 5, [(2, 1), (2, 2), (2, 3)])


@pytest.fixture
def glider():
    """Standard glider on a 10x10 torus."""
    return Simulation.from_cells(10, 10, GLIDER)


@pytest.fixture
def sim_config():
    """Fast engine config for tests."""
    return SimulationConfig(width=8, height=6, generations=5, frame_interval=0.01, seed=7)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
async def engine(blinker, sim_config, out):
    """Create test engine writing to an in-memory stream."""
    eng = LifeEngine(blinker, config=sim_config, display=DisplayConfig(clear="<clear>"), out=out)
    yield eng
    if eng._task:
        await eng.stop()
