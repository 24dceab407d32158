# nbody/physics/gravity.py
import numpy as np
from nbody.config.settings import G, EPSILON
from nbody.physics.vector import direction, scale, squared_distance


def pairwise_forces(positions, masses, g: float = G, eps: float = EPSILON, out=None, work=None) -> np.ndarray:
    """
    Exact O(n^2) gravitational force on every body from every other body.

    positions : (n, 3) array
    masses    : (n,) array
    out       : optional (n, 3) accumulator, cleared and reused
    work      : optional (n, n, 3) scratch for pair offsets, reused

    For each ordered pair (i, j), i != j:
        dir_ij = (r_j - r_i) / (|r_j - r_i| + eps)
        F_i   += dir_ij * g * m_i * m_j / (|r_j - r_i|^2 + eps)
    """
    pos = np.asarray(positions, dtype=float)
    m = np.asarray(masses, dtype=float)
    n = pos.shape[0]

    if out is None or out.shape != (n, 3):
        out = np.zeros((n, 3), dtype=float)
    else:
        out.fill(0.0)
    if n < 2:
        return out

    if work is None or work.shape != (n, n, 3):
        work = np.empty((n, n, 3), dtype=float)
    delta = np.subtract(pos[None, :, :], pos[:, None, :], out=work)  # delta[i, j] = r_j - r_i
    r2 = np.einsum("ijk,ijk->ij", delta, delta)
    # scalar weight per pair: |F_ij| / (|r_ij| + eps); m_i * m_j first keeps it symmetric
    weight = g * (m[:, None] * m[None, :]) / (r2 + eps) / (np.sqrt(r2) + eps)
    # i == j has delta = 0, so the diagonal contributes nothing
    np.einsum("ij,ijk->ik", weight, delta, out=out)
    return out


def pair_force(a, b, g: float = G, eps: float = EPSILON) -> np.ndarray:
    """Force on body a due to body b (single pair, same guards as above)."""
    f = g * a.mass * b.mass / (squared_distance(a.position, b.position) + eps)
    return scale(direction(a.position, b.position, eps), f)
