"""Tests for vector helpers and the Body entity."""

import numpy as np
import pytest

from nbody.physics.body import Body
from nbody.physics.vector import add, as_vec3, direction, distance, scale, squared_distance, vec3


class TestVector:

    def test_add_and_scale_return_new_values(self):
        a = vec3(1.0, 2.0, 3.0)
        b = vec3(-1.0, 0.5, 2.0)
        s = add(a, b)
        k = scale(a, -2.0)
        np.testing.assert_array_equal(s, [0.0, 2.5, 5.0])
        np.testing.assert_array_equal(k, [-2.0, -4.0, -6.0])
        np.testing.assert_array_equal(a, [1.0, 2.0, 3.0])
        assert s is not a and k is not a

    def test_distance(self):
        assert distance(vec3(0, 0, 0), vec3(3, 4, 0)) == pytest.approx(5.0)
        assert squared_distance(vec3(1, 1, 1), vec3(2, 3, 4)) == pytest.approx(14.0)

    def test_direction_is_unit_toward_target(self):
        d = direction(vec3(1, 1, 1), vec3(1, 1, 11))
        np.testing.assert_allclose(d, [0.0, 0.0, 1.0], atol=1e-6)
        assert d[2] < 1.0  # epsilon in the denominator

    def test_direction_of_coincident_points_is_finite(self):
        d = direction(vec3(2, 2, 2), vec3(2, 2, 2))
        assert np.all(np.isfinite(d))
        np.testing.assert_array_equal(d, [0.0, 0.0, 0.0])

    def test_as_vec3_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            as_vec3([1.0, 2.0])


class TestBody:

    def test_velocity_defaults_to_zero(self):
        b = Body((1, 2, 3), 2.5)
        np.testing.assert_array_equal(b.velocity, [0.0, 0.0, 0.0])
        assert b.mass == 2.5

    @pytest.mark.parametrize("mass", [0.0, -1.0, float("nan"), float("inf")])
    def test_rejects_bad_mass(self, mass):
        with pytest.raises(ValueError):
            Body((0, 0, 0), mass)

    def test_copy_is_independent(self):
        b = Body((1, 2, 3), 1.0, velocity=(0.1, 0.0, 0.0))
        c = b.copy()
        c.position[0] = 99.0
        assert b.position[0] == 1.0
        np.testing.assert_array_equal(c.velocity, b.velocity)
