"""Tests for the ODE models."""

import numpy as np
import pytest

from oscsim.physics import HarmonicOscillator, ODEModel


def test_harmonic_oscillator_rhs() -> None:
    model = HarmonicOscillator(w=4.0)
    dy = model.rhs(0.0, np.array([0.5, -2.0]))
    assert dy.shape == (2,)
    assert dy[0] == pytest.approx(-2.0)
    assert dy[1] == pytest.approx(-2.0)  # -w * pos


def test_harmonic_oscillator_is_callable_and_time_independent() -> None:
    model = HarmonicOscillator(w=1.0)
    y = np.array([1.0, 0.0])
    np.testing.assert_allclose(model(0.0, y), model(123.4, y))
    np.testing.assert_allclose(model(0.0, y), [0.0, -1.0])


def test_harmonic_oscillator_does_not_modify_state() -> None:
    model = HarmonicOscillator(w=2.0)
    y = np.array([0.3, 0.7])
    model(1.0, y)
    np.testing.assert_array_equal(y, [0.3, 0.7])


def test_state_names() -> None:
    model = HarmonicOscillator()
    assert model.state_names == ("position", "velocity")
    assert model.state_dim == 2


def test_ode_model_is_abstract() -> None:
    with pytest.raises(TypeError):
        ODEModel()  # type: ignore[abstract]
