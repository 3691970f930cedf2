"""Feed-forward neural network trained by online back propagation with momentum"""

import importlib.metadata

from .activations import (
    TransferFunction, Sigmoid, Step, HyperbolicTangent,
    SIGMOID, STEP, TANH, TRANSFER_FUNCTIONS, get_transfer_function)
from .connection import Connection
from .neuron import Neuron
from .model import Network
from .network_data import NetworkData
from .saving import save_model, load_model, load_data
from .training import train, train_data, TrainingResult
from .metrics import evaluate
from .utils.exception import NetworkError, InvalidArgumentError, FormatError

try:  # pragma: no cover
    __version__ = importlib.metadata.version("neuralnet-backprop")
except importlib.metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"


__all__ = ["Network", "NetworkData", "Neuron", "Connection",
           "TransferFunction", "Sigmoid", "Step", "HyperbolicTangent",
           "SIGMOID", "STEP", "TANH", "TRANSFER_FUNCTIONS", "get_transfer_function",
           "save_model", "load_model", "load_data",
           "train", "train_data", "TrainingResult", "evaluate",
           "NetworkError", "InvalidArgumentError", "FormatError"]
