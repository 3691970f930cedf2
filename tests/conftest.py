import numpy as np
import pytest

from neuralnet import SIGMOID, STEP, TANH


XOR_INPUTS = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
XOR_TARGETS = [[0.0], [1.0], [1.0], [0.0]]


@pytest.fixture(autouse=True)
def seed():
    """Weights are drawn from numpy's global generator."""
    np.random.seed(2084)
    return 2084


@pytest.fixture
def xor():
    return XOR_INPUTS, XOR_TARGETS


@pytest.fixture(params=[SIGMOID, STEP, TANH], ids=lambda tf: tf.name)
def transfer_function(request):
    return request.param


@pytest.fixture
def xor_text():
    return "\n".join([
        "topology: 2 2 1",
        "eta: 0.15",
        "momentum: 0.5",
        "transfer_function: sig",
        "in: 0 0",
        "out: 0",
        "in: 0 1",
        "out: 1",
        "in: 1 0",
        "out: 1",
        "in: 1 1",
        "out: 0",
    ]) + "\n"
