# nbody/physics/utils.py
import numpy as np
from nbody.config.settings import G, EPSILON


def kinetic_energy(bodies) -> float:
    return float(sum(0.5 * b.mass * np.dot(b.velocity, b.velocity) for b in bodies))


def potential_energy(bodies, g: float = G, eps: float = EPSILON) -> float:
    """
    Softened pair potential, -g m_i m_j / sqrt(r^2 + eps), summed over i < j.
    Used as a numerical stability diagnostic, not as a conservation proof:
    the force law's direction guard makes the two only approximately consistent.
    """
    u = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            diff = bodies[j].position - bodies[i].position
            u -= g * bodies[i].mass * bodies[j].mass / np.sqrt(np.dot(diff, diff) + eps)
    return float(u)


def total_energy(bodies, g: float = G, eps: float = EPSILON) -> float:
    return kinetic_energy(bodies) + potential_energy(bodies, g, eps)


def total_momentum(bodies) -> np.ndarray:
    p = np.zeros(3, dtype=float)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def center_of_mass(bodies) -> np.ndarray:
    m = sum(b.mass for b in bodies)
    if m == 0:
        return np.zeros(3, dtype=float)
    return sum(b.mass * b.position for b in bodies) / m
