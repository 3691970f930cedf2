import numpy as np

from neuralnet.utils.exception import InvalidArgumentError


class TransferFunction:
    """
    Activation function of a neuron together with its derivative.

    Instances are stateless, so one instance is shared by every neuron of a
    network (and by any number of networks).
    """
    name = None

    def calculate(self, x):
        raise NotImplementedError

    def derivative(self, x):
        raise NotImplementedError

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}()"

    def __eq__(self, other):
        return isinstance(other, TransferFunction) and self.name == other.name

    def __hash__(self):
        return hash(self.name)


# Sigmoid
class Sigmoid(TransferFunction):
    name = "sig"

    def calculate(self, x):
        return float(1 / (1 + np.exp(-np.clip(x, -500, 500))))

    def derivative(self, x):
        # e^-x / (1 + e^-x)^2, written so that it cannot overflow
        a = self.calculate(x)
        return a * (1 - a)


# Ramp, kept under its historical name. The derivative is 1 everywhere.
class Step(TransferFunction):
    name = "step"

    def calculate(self, x):
        return float(np.maximum(0.0, x))

    def derivative(self, x):
        return 1.0


# Hyperbolic tangent
class HyperbolicTangent(TransferFunction):
    name = "tanh"

    def calculate(self, x):
        return float(np.tanh(x))

    def derivative(self, x):
        a = np.tanh(x)
        return float(1.0 - a * a)


SIGMOID = Sigmoid()
STEP = Step()
TANH = HyperbolicTangent()

TRANSFER_FUNCTIONS = {tf.name: tf for tf in (SIGMOID, STEP, TANH)}


def get_transfer_function(name):
    """Return the shared transfer function for a canonical name ("sig", "step" or "tanh")."""
    if isinstance(name, TransferFunction):
        return name
    try:
        return TRANSFER_FUNCTIONS[name]
    except (KeyError, TypeError):
        raise InvalidArgumentError(
            f"Unknown transfer function {name!r}, expected one of {sorted(TRANSFER_FUNCTIONS)}")
