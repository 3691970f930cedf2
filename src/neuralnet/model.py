import operator

import numpy as np

from .activations import SIGMOID, get_transfer_function
from .losses import squared_error
from .neuron import Neuron
from neuralnet.utils.exception import InvalidArgumentError
from neuralnet.utils.logger import logger

class Network:
    """
    Fully-connected feed-forward network trained online by back propagation
    with momentum.

    Every layer holds its real neurons followed by one bias neuron whose
    output stays at 1.0. The network is mutated in place by every call and
    must only be used from one thread at a time.
    """
    def __init__(self, topology, eta, momentum, transfer_function=SIGMOID):
        topology = self._check_topology(topology)

        self._topology = topology # Number of real neurons in each layer [input, hidden1, ..., output]
        self._eta = self._check_rate(eta, "eta") # Learning rate
        self._momentum = self._check_rate(momentum, "momentum") # Fraction of the previous weight change carried over
        self._transfer_function = get_transfer_function(transfer_function)
        self._recent_average_error = 0.0

        layers = []
        for layer_number, layer_size in enumerate(topology):
            # Neurons of the last layer have no outgoing connections
            last = layer_number == len(topology) - 1
            number_outputs = 0 if last else topology[layer_number + 1]

            # Real neurons, then the bias neuron
            layer = [Neuron(number_outputs, i, self._transfer_function) for i in range(layer_size + 1)]
            layer[-1].output_value = 1.0
            layers.append(layer)
        self._layers = layers

        # Reused by get_results
        self._results = np.zeros(topology[-1])

        logger.debug(f"Created network {topology} eta={self._eta} momentum={self._momentum} "
                     f"transfer_function={self._transfer_function}")

    @staticmethod
    def _check_rate(value, name):
        try:
            return float(value)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"{name} must be a number, got {value!r}")

    @staticmethod
    def _check_topology(topology):
        try:
            topology = list(topology)
        except TypeError:
            raise InvalidArgumentError(f"Topology must be a sequence of layer sizes, got {topology!r}")

        if len(topology) < 1:
            raise InvalidArgumentError("Topology needs at least one layer")

        checked = []
        for size in topology:
            if isinstance(size, (bool, np.bool_)) or not isinstance(size, (int, np.integer)) or size < 0:
                raise InvalidArgumentError(f"Invalid layer size {size!r} in topology {topology}")
            checked.append(int(size))
        return checked

    @property
    def topology(self):
        return list(self._topology)

    @property
    def eta(self):
        return self._eta

    @property
    def momentum(self):
        return self._momentum

    @property
    def transfer_function(self):
        return self._transfer_function

    @property
    def layers(self):
        return self._layers

    @property
    def total_layers(self):
        return len(self._layers)

    @property
    def input_layer(self):
        return self._layers[0]

    @property
    def output_layer(self):
        return self._layers[-1]

    @property
    def recent_average_error(self):
        """
        Error of the most recent back propagation: 0.5 * sum of squared
        output deltas for that one sample. Not averaged over time.
        """
        return self._recent_average_error

    def get_layer(self, index):
        return self._layers[index]

    # Forward propagation
    def feed_forward(self, inputs):
        input_layer = self._layers[0]
        inputs = self._check_values(inputs, len(input_layer) - 1, "inputs")

        # The bias neuron is left untouched
        for i, value in enumerate(inputs):
            input_layer[i].output_value = value

        prev_layer = input_layer
        for layer in self._layers[1:]:
            for neuron in layer[:-1]:
                neuron.feed_forward(prev_layer)
            prev_layer = layer

    # Back propagation
    def back_propagation(self, targets):
        output_layer = self._layers[-1]
        targets = self._check_values(targets, len(output_layer) - 1, "targets")

        # Overall error of this sample
        outputs = [neuron.output_value for neuron in output_layer[:-1]]
        error = squared_error(targets, outputs)
        self._recent_average_error = error

        # Output layer gradients
        for neuron, target in zip(output_layer[:-1], targets):
            neuron.calculate_output_gradient(target)

        # Hidden layer gradients, bias neurons included
        for layer_number in range(len(self._layers) - 2, 0, -1):
            next_layer = self._layers[layer_number + 1]
            for neuron in self._layers[layer_number]:
                neuron.calculate_hidden_gradient(next_layer)

        # Update the weights from the output layer back to the first hidden layer
        for layer_number in range(len(self._layers) - 1, 0, -1):
            prev_layer = self._layers[layer_number - 1]
            for neuron in self._layers[layer_number][:-1]:
                neuron.update_input_weights(prev_layer, self._eta, self._momentum)

        return error

    def get_results(self):
        """
        Outputs of the last layer, bias excluded.

        The same array is refilled and returned on every call; copy it to keep
        a snapshot.
        """
        output_layer = self._layers[-1]
        for i, neuron in enumerate(output_layer[:-1]):
            self._results[i] = neuron.output_value
        return self._results

    # Make prediction
    def predict(self, inputs):
        self.feed_forward(inputs)
        return [float(value) for value in self.get_results()]

    def get_layer_outputs(self, index):
        layer = self._layer_at(index)
        return np.array([neuron.output_value for neuron in layer[:-1]], dtype=float)

    def set_layer_outputs(self, index, values):
        """Overwrite the outputs of a layer's real neurons, e.g. to treat a hidden layer as an output."""
        layer = self._layer_at(index)
        values = self._check_values(values, len(layer) - 1, f"values for layer {index}")
        for neuron, value in zip(layer[:-1], values):
            neuron.output_value = value

    def _layer_at(self, index):
        try:
            index = operator.index(index)
        except TypeError:
            raise InvalidArgumentError(f"Layer index must be an integer, got {index!r}")
        if not -len(self._layers) <= index < len(self._layers):
            raise InvalidArgumentError(
                f"Layer index {index} out of range for a network of {len(self._layers)} layers")
        return self._layers[index]

    @staticmethod
    def _check_values(values, expected, what):
        try:
            values = [float(value) for value in values]
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"{what} must be a sequence of numbers")
        if len(values) != expected:
            raise InvalidArgumentError(f"Expected {expected} {what}, got {len(values)}")
        return values

    def __repr__(self):
        return (f"Network(topology={self._topology}, eta={self._eta}, "
                f"momentum={self._momentum}, transfer_function={self._transfer_function})")
