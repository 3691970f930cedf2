import numpy as np

from .connection import Connection


class Neuron:
    """
    Single neuron owning its outgoing connections.

    Connection i of a neuron feeds neuron i of the next layer. The weights are
    kept in `weights` and the last applied changes in `delta_weights`.
    """
    def __init__(self, number_outputs, index, transfer_function):
        self.index = index # Position inside the layer, also our slot in the previous layer's arrays
        self.transfer_function = transfer_function

        self.output_value = 0.0
        self.sum = 0.0 # Pre-activation value from the last feed forward
        self.gradient = 0.0

        # Random initial weights in [0, 1), no momentum yet
        self.weights = np.random.random(number_outputs)
        self.delta_weights = np.zeros(number_outputs)

    @property
    def outgoing_connections(self):
        return [Connection(self, i) for i in range(len(self.weights))]

    def connection(self, index):
        return Connection(self, index)

    def feed_forward(self, prev_layer):
        total = 0.0

        # Previous layer's outputs are our inputs, bias neuron included
        for neuron in prev_layer:
            total += neuron.output_value * neuron.weights[self.index]

        self.sum = float(total)
        self.output_value = self.transfer_function.calculate(self.sum)

    def calculate_output_gradient(self, target_value):
        delta = target_value - self.output_value
        self.gradient = delta * self.transfer_function.derivative(self.sum)

    def sum_dow(self, next_layer):
        """Sum of our contributions to the gradients of the neurons we feed."""
        total = 0.0

        # The next layer's bias neuron has no incoming connection
        for n in range(len(next_layer) - 1):
            total += self.weights[n] * next_layer[n].gradient

        return float(total)

    def calculate_hidden_gradient(self, next_layer):
        self.gradient = self.sum_dow(next_layer) * self.transfer_function.derivative(self.sum)

    def update_input_weights(self, prev_layer, eta, momentum):
        # The weights to update are stored in the previous layer's neurons
        for neuron in prev_layer:
            old_delta = neuron.delta_weights[self.index]

            # Input scaled by gradient and learning rate, plus a fraction of the previous change
            new_delta = eta * neuron.output_value * self.gradient + momentum * old_delta

            neuron.delta_weights[self.index] = new_delta
            neuron.weights[self.index] += new_delta

    def __repr__(self):
        return (f"Neuron(index={self.index}, output_value={self.output_value}, "
                f"connections={len(self.weights)})")
