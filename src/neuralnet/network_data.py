"""
Reading and writing of network data in a line-oriented text format.

A file holds the definition of a network (topology, learning rate,
momentum, transfer function), optionally its connection weights and
optionally a set of training samples:

    topology: 2 2 1
    eta: 0.15
    momentum: 0.5
    transfer_function: sig
    in: 0.0 1.0
    out: 1.0

    neuron: 0.52 0.13
    neuron: 0.95 0.44
    neuron: 0.01 0.67

    neuron: 0.31
    neuron: 0.86
    neuron: 0.27

Each `neuron:` line holds the outgoing weights of one neuron, layer by
layer, bias neurons included and the last layer excluded.
"""

import io
import re

import numpy as np

from .activations import SIGMOID, TRANSFER_FUNCTIONS
from .model import Network
from neuralnet.utils.exception import FormatError, InvalidArgumentError
from neuralnet.utils.logger import logger


# A record starts with a label such as "topology:"
LABEL_PATTERN = re.compile(r"^\s*([^:\s]+):")


def _leading(tokens, cast):
    """Convert tokens until the first one that does not parse."""
    values = []
    for token in tokens:
        try:
            values.append(cast(token))
        except ValueError:
            break
    return values


def _format_float(value):
    return repr(float(value))


class _WeightReader:
    """
    Collects `neuron:` rows in layer-major, neuron-minor order.

    Once a row is found to be invalid the whole weight set is discarded;
    weights are never applied partially.
    """

    def __init__(self):
        self.rows = None
        self.topology = None
        self.layer = 0
        self.neuron = 0
        self.valid = True
        self.seen = False

    def _allocate(self, topology):
        self.topology = list(topology)
        # The last layer has no connections; every other layer has a bias neuron
        self.rows = [
            [None] * (topology[l] + 1)
            for l in range(len(topology) - 1)
        ]

    def read(self, topology, tokens, line_number):
        self.seen = True
        if not self.valid:
            return
        if self.rows is None:
            self._allocate(topology)
        elif topology != self.topology:
            self._invalidate(f"line {line_number}: topology changed after weights were read")
            return

        if self.layer >= len(self.rows):
            self._invalidate(f"line {line_number}: more neuron lines than the topology has neurons")
            return

        expected = topology[self.layer + 1]
        weights = _leading(tokens, float)
        if len(weights) < expected:
            self._invalidate(f"line {line_number}: too few weights, expected {expected}")
            return
        if len(weights) > expected:
            self._invalidate(f"line {line_number}: too many weights, expected {expected}")
            return

        self.rows[self.layer][self.neuron] = weights

        self.neuron += 1
        if self.neuron >= len(self.rows[self.layer]):
            self.layer += 1
            self.neuron = 0

    def _invalidate(self, reason):
        self.valid = False
        logger.warning(f"Ignoring all connection weights, {reason}.")

    def complete(self):
        return self.rows is not None and self.layer >= len(self.rows)

    def apply(self, network):
        if not self.seen:
            return False
        if not self.valid:
            return False
        if self.topology != network.topology:
            logger.warning("Ignoring connection weights read for a different topology.")
            return False
        if not self.complete():
            logger.warning("Ignoring incomplete connection weights, keeping random weights.")
            return False

        for l, layer_rows in enumerate(self.rows):
            layer = network.get_layer(l)
            for neuron, weights in zip(layer, layer_rows):
                neuron.weights[:] = weights
        return True


class NetworkData:
    """
    A network together with an optional training set.

    Instances are built around an existing network (to save it) or parsed
    from text (to load one).
    """

    def __init__(self, network, inputs=None, target_outputs=None):
        inputs = [] if inputs is None else inputs
        target_outputs = [] if target_outputs is None else target_outputs

        # Inputs and target outputs are paired one to one
        if len(inputs) != len(target_outputs):
            raise InvalidArgumentError(
                f"{len(inputs)} input sets but {len(target_outputs)} target output sets")

        topology = network.topology
        checked_inputs, checked_outputs = [], []
        for i, (sample_in, sample_out) in enumerate(zip(inputs, target_outputs)):
            try:
                sample_in = np.asarray(sample_in, dtype=float)
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"Incorrect number of inputs in set {i}")
            try:
                sample_out = np.asarray(sample_out, dtype=float)
            except (TypeError, ValueError):
                raise InvalidArgumentError(f"Incorrect number of target outputs in set {i}")
            if sample_in.shape != (topology[0],):
                raise InvalidArgumentError(f"Incorrect number of inputs in set {i}")
            if sample_out.shape != (topology[-1],):
                raise InvalidArgumentError(f"Incorrect number of target outputs in set {i}")
            checked_inputs.append(sample_in)
            checked_outputs.append(sample_out)

        self.network = network
        self.inputs = checked_inputs
        self.target_outputs = checked_outputs
        self.weights_loaded = False

    def __len__(self):
        return len(self.inputs)

    def samples(self):
        return list(zip(self.inputs, self.target_outputs))

    @classmethod
    def parse(cls, lines):
        """
        Build network data from an iterable of text lines (an open file, a
        StringIO, a list of strings...).

        Raises FormatError when required data is missing or malformed.
        """
        inputs, target_outputs = [], []
        topology = None
        eta = None
        momentum = None
        transfer_function = None
        weights = _WeightReader()

        for line_number, line in enumerate(lines, start=1):
            match = LABEL_PATTERN.match(line)
            if match is None:
                continue
            label = match.group(1)
            tokens = line[match.end():].split()

            if label == "topology":
                topology = _leading(tokens, int)
                if not topology:
                    raise FormatError(f"line {line_number}: invalid topology.")
                if any(size < 0 for size in topology):
                    raise FormatError(f"line {line_number}: negative layer size in topology {topology}.")

            elif label == "eta":
                eta = cls._parse_float(tokens, "eta", line_number)

            elif label == "momentum":
                momentum = cls._parse_float(tokens, "momentum", line_number)

            elif label == "transfer_function":
                if not tokens:
                    raise FormatError(f"line {line_number}: empty transfer function definition.")
                try:
                    transfer_function = TRANSFER_FUNCTIONS[tokens[0]]
                except KeyError:
                    raise FormatError(f"line {line_number}: unrecognized transfer function {tokens[0]!r}.")

            elif label == "in":
                if topology is None:
                    raise FormatError(f"line {line_number}: inputs must appear after topology.")
                inputs.append(cls._parse_sample(tokens, topology[0], "training inputs", line_number))

            elif label == "out":
                if topology is None:
                    raise FormatError(f"line {line_number}: target outputs must appear after topology.")
                target_outputs.append(cls._parse_sample(tokens, topology[-1], "target outputs", line_number))

            elif label == "neuron":
                if topology is None:
                    raise FormatError(f"line {line_number}: connection weights must appear after topology.")
                weights.read(topology, tokens, line_number)

            else:
                logger.warning(f"Unknown label {label!r} on line {line_number}, ignoring.")

        if len(inputs) != len(target_outputs):
            raise FormatError(
                f"mismatched samples, {len(inputs)} inputs and {len(target_outputs)} target outputs.")

        if topology is None:
            raise FormatError("no topology defined.")

        if transfer_function is None:
            transfer_function = SIGMOID
            logger.warning("No transfer function defined, defaulting to sigmoid.")

        if eta is None:
            raise FormatError("eta not defined.")

        if momentum is None:
            raise FormatError("momentum not defined.")

        try:
            network = Network(topology, eta, momentum, transfer_function)
            # Samples read before a later topology line may no longer fit
            data = cls(network, inputs, target_outputs)
        except InvalidArgumentError as e:
            raise FormatError(str(e)) from e

        data.weights_loaded = weights.apply(network)
        logger.debug(f"Parsed {network} with {len(data)} samples, weights loaded: {data.weights_loaded}")
        return data

    @classmethod
    def loads(cls, text):
        return cls.parse(io.StringIO(text))

    @staticmethod
    def _parse_float(tokens, name, line_number):
        values = _leading(tokens[:1], float)
        if not values:
            raise FormatError(f"line {line_number}: invalid {name}.")
        return values[0]

    @staticmethod
    def _parse_sample(tokens, size, name, line_number):
        values = _leading(tokens, float)
        if len(values) < size:
            raise FormatError(f"line {line_number}: too few {name}, expected {size}.")
        if len(values) > size:
            logger.warning(f"Ignoring {len(values) - size} extra {name} on line {line_number}.")
        return values[:size]

    def to_lines(self):
        """Lines of the text format, without line terminators."""
        network = self.network

        yield "topology: " + " ".join(str(size) for size in network.topology)
        yield f"eta: {_format_float(network.eta)}"
        yield f"momentum: {_format_float(network.momentum)}"
        yield f"transfer_function: {network.transfer_function}"

        for sample_in, sample_out in zip(self.inputs, self.target_outputs):
            yield "in: " + " ".join(_format_float(v) for v in sample_in)
            yield "out: " + " ".join(_format_float(v) for v in sample_out)

        for l in range(network.total_layers - 1):
            yield ""
            for neuron in network.get_layer(l):
                yield "neuron: " + " ".join(_format_float(w) for w in neuron.weights)

    def save(self, stream):
        """Write all known data (definition, samples, weights) to a text stream."""
        for line in self.to_lines():
            stream.write(line + "\n")

    def dumps(self):
        stream = io.StringIO()
        self.save(stream)
        return stream.getvalue()
