# nbody/physics/body.py
import math

from nbody.physics.vector import as_vec3, zero


class Body:
    """
    Point mass: position, velocity, mass.
    Velocity starts at zero unless given. Only the engine step mutates a body.
    """
    __slots__ = ("position", "velocity", "mass")

    def __init__(self, position, mass, velocity=None):
        mass = float(mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise ValueError(f"Body mass must be finite and > 0, got {mass}")
        self.position = as_vec3(position)
        self.velocity = zero() if velocity is None else as_vec3(velocity)
        self.mass = mass

    def copy(self):
        return Body(self.position.copy(), self.mass, self.velocity.copy())

    def __repr__(self):
        return f"Body(pos={self.position}, vel={self.velocity}, m={self.mass:g})"
