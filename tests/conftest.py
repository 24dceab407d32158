"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nbody.engine.nbody import NBodySimulation  # noqa: E402
from nbody.physics.body import Body  # noqa: E402


def make_pair(separation=2.0, mass=1.0):
    """Two equal masses on the x-axis, symmetric about the origin, at rest."""
    half = separation / 2.0
    return [Body((-half, 0.0, 0.0), mass), Body((half, 0.0, 0.0), mass)]


@pytest.fixture
def pair_factory():
    """State-container factory that ignores n and builds the (-1,0,0)/(1,0,0) pair."""
    def factory(n):
        return NBodySimulation(make_pair(), g=1.0, dt=0.016)
    return factory


@pytest.fixture
def helix_engine():
    return NBodySimulation.helix(12)
