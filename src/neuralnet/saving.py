import os

from .model import Network
from .network_data import NetworkData
from neuralnet.utils.logger import logger


def save_model(model, path, inputs=None, target_outputs=None):
    """
    Save a Network (or NetworkData) to a text file.

    Stored fields:
    - topology
    - eta and momentum
    - transfer function
    - training samples, if any
    - connection weights
    """
    if isinstance(model, Network):
        data = NetworkData(model, inputs, target_outputs)
    else:
        data = model
        if inputs is not None or target_outputs is not None:
            data = NetworkData(model.network, inputs, target_outputs)

    directory = os.path.dirname(os.fspath(path))
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        data.save(f)
    logger.info(f"Model saved to {path}")
    return data


def load_data(path) -> NetworkData:
    """
    Load network data (network and training samples) from a text file.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = NetworkData.parse(f)
    logger.info(f"Model loaded from {path}")
    return data


def load_model(path) -> Network:
    """Load only the network stored in a text file."""
    return load_data(path).network
