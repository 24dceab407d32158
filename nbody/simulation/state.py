# nbody/simulation/state.py
import logging
from typing import Callable, Optional

import numpy as np

from nbody.config import settings
from nbody.engine.nbody import NBodySimulation
from nbody.simulation.export import extract_positions

logger = logging.getLogger(__name__)


class SimulationState:
    """
    Holds zero or one live NBodySimulation for a driver session.

    Lifecycle: empty -> initialize(n) -> step()* -> reset() or discard.

    Re-initialization policy (fixed per container):
      "keep"    - initialize() while an engine exists is a no-op
      "replace" - initialize() always discards the old engine and builds a new one

    Uninitialized access is graceful across the board: step() does nothing and
    extract() returns an empty buffer.

    Not thread-safe; the driver loop is the only caller.
    """
    def __init__(self, policy: str = settings.REINIT_POLICY,
                 factory: Callable[[int], NBodySimulation] = NBodySimulation.helix):
        if policy not in settings.REINIT_POLICIES:
            raise ValueError(f"Unknown re-initialization policy: {policy!r}")
        self.policy = policy
        self.factory = factory
        self._engine: Optional[NBodySimulation] = None

    @property
    def engine(self) -> Optional[NBodySimulation]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def body_count(self) -> int:
        return 0 if self._engine is None else self._engine.n

    def initialize(self, n: int) -> NBodySimulation:
        n = settings.validate_body_count(n)
        if self._engine is not None and self.policy == settings.REINIT_KEEP:
            logger.debug("initialize(%d) ignored: keeping %r", n, self._engine)
            return self._engine

        if self._engine is not None:
            logger.info("Replacing simulation (%d bodies) with %d bodies", self._engine.n, n)
        engine = self.factory(n)
        if engine.n != n:
            raise ValueError(f"Factory built {engine.n} bodies, expected {n}")
        self._engine = engine
        logger.info("Simulation initialized with %d bodies", n)
        return engine

    def step(self) -> bool:
        """Advance one step. Returns False (and does nothing) when uninitialized."""
        if self._engine is None:
            logger.debug("step() before initialize(); ignored")
            return False
        self._engine.step()
        return True

    def extract(self, layout: Optional[str] = None, scale: float = 1.0,
                out: Optional[np.ndarray] = None) -> np.ndarray:
        return extract_positions(self, scale=scale, layout=layout, out=out)

    def reset(self):
        if self._engine is not None:
            logger.info("Simulation torn down after %d steps", self._engine.steps)
        self._engine = None

    def __repr__(self):
        return f"SimulationState(policy={self.policy!r}, engine={self._engine!r})"
