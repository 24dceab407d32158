"""Tests for the simulation state container lifecycle."""

import numpy as np
import pytest

from nbody.engine.nbody import NBodySimulation
from nbody.simulation.state import SimulationState


class TestLifecycle:

    def test_starts_empty(self):
        state = SimulationState()
        assert not state.is_initialized
        assert state.engine is None
        assert state.body_count == 0

    def test_uninitialized_access_is_graceful(self):
        state = SimulationState()
        assert state.step() is False
        for layout in ("xyz", "xy"):
            buf = state.extract(layout=layout)
            assert buf.shape == (0,)
            assert buf.dtype == np.float32

    def test_initialize_builds_helix(self):
        state = SimulationState()
        engine = state.initialize(25)
        assert state.is_initialized
        assert state.body_count == 25
        np.testing.assert_array_equal(engine.positions(), NBodySimulation.helix(25).positions())

    def test_keep_policy_preserves_running_engine(self):
        state = SimulationState(policy="keep")
        first = state.initialize(10)
        state.step()
        state.step()
        again = state.initialize(40)
        assert again is first
        assert state.body_count == 10
        assert state.engine.steps == 2

    def test_replace_policy_starts_over(self):
        state = SimulationState(policy="replace")
        first = state.initialize(10)
        state.step()
        second = state.initialize(40)
        assert second is not first
        assert state.body_count == 40
        assert second.steps == 0

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            SimulationState(policy="sometimes")

    def test_bad_count_rejected_even_when_keeping(self):
        state = SimulationState(policy="keep")
        state.initialize(5)
        with pytest.raises(ValueError):
            state.initialize(0)

    def test_factory_must_honour_count(self, pair_factory):
        state = SimulationState(factory=pair_factory)
        with pytest.raises(ValueError):
            state.initialize(3)
        assert not state.is_initialized

    def test_step_advances_engine(self, pair_factory):
        state = SimulationState(factory=pair_factory)
        state.initialize(2)
        assert state.step() is True
        assert state.engine.steps == 1

    def test_reset_tears_down(self):
        state = SimulationState()
        state.initialize(8)
        state.reset()
        assert not state.is_initialized
        assert state.extract().size == 0
        state.initialize(3)
        assert state.body_count == 3


def test_concrete_scenario_through_container(pair_factory):
    state = SimulationState(factory=pair_factory)
    state.initialize(2)
    before = state.extract(layout="xyz")
    state.step()
    after = state.extract(layout="xyz")
    dx0 = float(after[0]) - float(before[0])
    dx1 = float(after[3]) - float(before[3])
    assert dx0 > 0.0
    assert dx1 < 0.0
    assert abs(abs(dx0) - abs(dx1)) < 1e-6


def test_initialize_accepts_numpy_integer():
    state = SimulationState()
    state.initialize(np.int64(4))
    assert state.body_count == 4
    assert state.extract(layout="xyz").shape == (12,)
