import math

import pytest

from neuralnet import (SIGMOID, STEP, TANH, TRANSFER_FUNCTIONS, HyperbolicTangent,
                       InvalidArgumentError, Sigmoid, Step, get_transfer_function)


def test_names():
    assert str(SIGMOID) == "sig"
    assert str(STEP) == "step"
    assert str(TANH) == "tanh"
    assert set(TRANSFER_FUNCTIONS) == {"sig", "step", "tanh"}


@pytest.mark.parametrize("name", ["sig", "step", "tanh"])
def test_lookup_returns_shared_instance(name):
    assert get_transfer_function(name) is TRANSFER_FUNCTIONS[name]
    assert get_transfer_function(TRANSFER_FUNCTIONS[name]) is TRANSFER_FUNCTIONS[name]


@pytest.mark.parametrize("name", ["relu", "SIG", "", None])
def test_lookup_unknown(name):
    with pytest.raises(InvalidArgumentError):
        get_transfer_function(name)


def test_equality_by_name():
    assert Sigmoid() == SIGMOID
    assert HyperbolicTangent() != SIGMOID
    assert len({Step(), STEP}) == 1


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 0.7, 2.5])
def test_sigmoid(x):
    e = math.exp(-x)
    assert SIGMOID.calculate(x) == pytest.approx(1 / (1 + e))
    assert SIGMOID.derivative(x) == pytest.approx(e / (1 + e) ** 2)


def test_sigmoid_extremes_are_finite():
    for x in [-1e6, -800.0, 800.0, 1e6]:
        y, dy = SIGMOID.calculate(x), SIGMOID.derivative(x)
        assert math.isfinite(y) and 0.0 <= y <= 1.0
        assert math.isfinite(dy) and dy >= 0.0


@pytest.mark.parametrize("x, y", [(-2.0, 0.0), (0.0, 0.0), (0.25, 0.25), (3.0, 3.0)])
def test_step_is_a_ramp(x, y):
    assert STEP.calculate(x) == y


@pytest.mark.parametrize("x", [-10.0, -1.0, 0.0, 1.0, 10.0])
def test_step_derivative_is_constant(x):
    assert STEP.derivative(x) == 1.0


@pytest.mark.parametrize("x", [-2.0, -0.3, 0.0, 0.4, 1.5])
def test_tanh(x):
    assert TANH.calculate(x) == pytest.approx(math.tanh(x))
    assert TANH.derivative(x) == pytest.approx(1 - math.tanh(x) ** 2)
