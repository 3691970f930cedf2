import numpy as np


def set_weights(network, weights):
    """weights[l][n] is the row of outgoing weights of neuron n in layer l."""
    for layer, rows in zip(network.layers, weights):
        for neuron, row in zip(layer, rows):
            neuron.weights[:] = row


def all_weights(network):
    return [np.concatenate([n.weights for n in layer]) for layer in network.layers[:-1]]
