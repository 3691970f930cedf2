import numpy as np
import pytest

from _utils import all_weights
from neuralnet import Network, NetworkData, TANH, load_data, load_model, save_model


def test_save_and_load_network(tmp_path, xor):
    inputs, targets = xor
    network = Network([2, 4, 1], 0.2, 0.4, TANH)
    path = tmp_path / "models" / "xor.txt"

    save_model(network, path, inputs, targets)
    assert path.exists()

    data = load_data(path)
    assert data.weights_loaded
    assert data.network.topology == [2, 4, 1]
    assert data.network.transfer_function is TANH
    assert len(data) == 4
    for before, after in zip(all_weights(network), all_weights(data.network)):
        assert np.array_equal(before, after)


def test_save_network_data(tmp_path, xor_text):
    data = NetworkData.loads(xor_text)
    path = tmp_path / "out.txt"

    returned = save_model(data, str(path))
    assert returned is data
    assert path.read_text() == data.dumps()

    network = load_model(path)
    assert isinstance(network, Network)
    assert network.topology == data.network.topology


def test_save_network_data_with_other_samples(tmp_path, xor_text):
    data = NetworkData.loads(xor_text)
    path = tmp_path / "out.txt"

    save_model(data, path, [[0.5, 0.5]], [[0.25]])

    assert len(load_data(path)) == 1


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_data(tmp_path / "missing.txt")
