# nbody/physics/integrator.py
import numpy as np
from nbody.config.settings import require_positive


class SemiImplicitEuler:
    """
    Symplectic (semi-implicit) Euler.
    Velocity is updated from the force first; position then moves with the
    already-updated velocity.
    """
    def __init__(self, dt: float):
        self.dt = require_positive("dt", dt)

    def step(self, positions: np.ndarray, velocities: np.ndarray, forces: np.ndarray, masses: np.ndarray):
        """
        In-place update of (n, 3) positions and velocities.
        forces[i] is the total force on body i, masses has shape (n,).
        """
        velocities += forces / masses[:, np.newaxis] * self.dt
        positions += velocities * self.dt
