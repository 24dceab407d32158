# nbody/physics/vector.py
import numpy as np
from nbody.config.settings import EPSILON

# Vectors are plain float arrays of shape (3,). Every helper returns a new
# array and leaves its inputs untouched.


def vec3(x=0.0, y=0.0, z=0.0) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


def zero() -> np.ndarray:
    return np.zeros(3, dtype=float)


def as_vec3(v) -> np.ndarray:
    """Coerce a 3-sequence to a fresh float vector; anything else raises ValueError."""
    arr = np.array(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"Cannot coerce {v!r} to 3D vector")
    return arr


def add(a, b) -> np.ndarray:
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)


def scale(v, k: float) -> np.ndarray:
    return np.asarray(v, dtype=float) * float(k)


def squared_distance(a, b) -> float:
    d = np.asarray(b, dtype=float) - np.asarray(a, dtype=float)
    return float(np.dot(d, d))


def distance(a, b) -> float:
    return float(np.sqrt(squared_distance(a, b)))


def direction(a, b, eps: float = EPSILON) -> np.ndarray:
    """
    Unit vector from a toward b.
    eps is added to the norm before dividing, so coincident points give the
    zero vector instead of NaN.
    """
    d = np.asarray(b, dtype=float) - np.asarray(a, dtype=float)
    return d / (np.sqrt(np.dot(d, d)) + eps)
