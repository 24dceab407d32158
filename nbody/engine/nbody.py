# nbody/engine/nbody.py
import logging
import math
from typing import Optional

import numpy as np

from nbody.config import settings
from nbody.physics.body import Body
from nbody.physics.gravity import pairwise_forces
from nbody.physics.integrator import SemiImplicitEuler

logger = logging.getLogger(__name__)


def helix_layout(n: int, radius: Optional[float] = None, height: Optional[float] = None,
                 turns: Optional[int] = None):
    """
    Deterministic helix of n bodies (same n -> same bodies).

    t = i / n, angle = t * 2pi * turns
    position = (cos(angle) * radius, sin(angle) * radius, (t - 0.5) * height)
    mass = 1 + t
    """
    n = settings.validate_body_count(n)
    radius = settings.HELIX_RADIUS if radius is None else float(radius)
    height = settings.HELIX_HEIGHT if height is None else float(height)
    turns = settings.HELIX_TURNS if turns is None else turns

    bodies = []
    for i in range(n):
        t = i / n
        angle = t * 2.0 * math.pi * turns
        bodies.append(Body(
            position=(math.cos(angle) * radius, math.sin(angle) * radius, (t - 0.5) * height),
            mass=1.0 + t,
        ))
    return bodies


class NBodySimulation:
    """
    Exact pairwise N-body engine.

    Copies the given bodies into its own (n, 3) position/velocity arrays and
    (n,) mass array; the caller's Body objects are never touched afterwards.
    Each step runs two phases in order: all forces from the pre-step
    positions, then semi-implicit Euler for every body.
    """
    def __init__(self, bodies, g: float = settings.G, dt: float = settings.DT, eps: float = settings.EPSILON):
        bodies = list(bodies)
        if not bodies:
            raise ValueError("Simulation needs at least one body")
        if not all(isinstance(b, Body) for b in bodies):
            raise ValueError("Simulation bodies must be Body instances")

        self.g = settings.require_positive("g", g)
        self.eps = settings.require_positive("eps", eps)
        self.integrator = SemiImplicitEuler(dt)

        n = len(bodies)
        self._positions = np.array([b.position for b in bodies], dtype=float)
        self._velocities = np.array([b.velocity for b in bodies], dtype=float)
        self._masses = np.array([b.mass for b in bodies], dtype=float)
        self._forces = np.zeros((n, 3), dtype=float)
        self._work = np.empty((n, n, 3), dtype=float)
        self.steps = 0
        self.time = 0.0
        logger.debug("Created %r", self)

    @classmethod
    def helix(cls, n: int, **kwargs):
        return cls(helix_layout(n), **kwargs)

    @property
    def dt(self) -> float:
        return self.integrator.dt

    @property
    def n(self) -> int:
        return self._masses.shape[0]

    def __len__(self):
        return self.n

    @property
    def bodies(self):
        """Snapshot of the current state as independent Body objects."""
        return tuple(
            Body(p, m, velocity=v)
            for p, v, m in zip(self._positions, self._velocities, self._masses)
        )

    def positions(self) -> np.ndarray:
        return self._positions.copy()

    def velocities(self) -> np.ndarray:
        return self._velocities.copy()

    def masses(self) -> np.ndarray:
        return self._masses.copy()

    def step(self):
        # Phase 1: forces from pre-step positions only
        pairwise_forces(self._positions, self._masses, self.g, self.eps, out=self._forces, work=self._work)
        # Phase 2: integrate
        self.integrator.step(self._positions, self._velocities, self._forces, self._masses)
        self.steps += 1
        self.time += self.dt

    def __repr__(self):
        return (f"NBodySimulation(n={self.n}, g={self.g:g}, dt={self.dt:g}, "
                f"eps={self.eps:g}, steps={self.steps})")
