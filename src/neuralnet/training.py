"""
Online training loop for a Network.

Every epoch feeds each sample forward, back-propagates its target and
averages the per-sample errors. Training stops once that average drops
below the error goal or the epoch limit is reached.

Run as a script to train the network stored in a data file:

    python -m neuralnet.training data/xor.txt [data/xor_trained.txt]
"""

import sys

import matplotlib.pyplot as plt

from .losses import mean_squared_error
from .metrics import evaluate
from .saving import load_data, save_model
from neuralnet.utils.config import settings
from neuralnet.utils.exception import InvalidArgumentError
from neuralnet.utils.logger import logger


class TrainingResult:
    def __init__(self, epochs, error, converged, history):
        self.epochs = epochs
        self.error = error # Mean error of the last epoch
        self.converged = converged
        self.history = history # Mean error of every epoch

    def __repr__(self):
        return (f"TrainingResult(epochs={self.epochs}, error={self.error}, "
                f"converged={self.converged})")


def train(network, inputs, target_outputs, max_epochs=None, max_error=None, report_every=None):
    max_epochs = settings.max_epochs if max_epochs is None else max_epochs
    max_error = settings.max_error if max_error is None else max_error
    report_every = settings.report_every if report_every is None else report_every

    if len(inputs) != len(target_outputs):
        raise InvalidArgumentError(
            f"{len(inputs)} input sets but {len(target_outputs)} target output sets")
    if len(inputs) == 0:
        raise InvalidArgumentError("Cannot train on an empty sample set")
    if max_epochs < 1:
        raise InvalidArgumentError(f"max_epochs must be at least 1, got {max_epochs}")

    history = []
    converged = False
    epochs = 0
    error = 0.0

    while epochs < max_epochs:
        epochs += 1
        errors = []
        for sample_in, sample_out in zip(inputs, target_outputs):
            network.feed_forward(sample_in)
            network.back_propagation(sample_out)
            errors.append(network.recent_average_error)

        error = mean_squared_error(errors)
        history.append(error)

        if report_every and epochs % report_every == 0:
            logger.info(f"Epoch {epochs}: error {error}")

        if error < max_error:
            converged = True
            break

    if converged:
        logger.info(f"Took {epochs} epochs to converge (error {error}).")
    else:
        logger.info(f"Did not converge after {epochs} epochs (error {error}).")

    return TrainingResult(epochs, error, converged, history)


def train_data(data, **kwargs):
    """Train the network of a NetworkData on its own samples."""
    return train(data.network, data.inputs, data.target_outputs, **kwargs)


def plot_training_error(result, path):
    fig, ax = plt.subplots()
    ax.plot(range(1, len(result.history) + 1), result.history)
    ax.set_xlabel("Epoch")
    ax.set_ylabel("Mean error")
    ax.set_yscale("log")
    ax.set_title("Training error")
    fig.savefig(path)
    plt.close(fig)
    logger.info(f"Training error plot saved to {path}")


def run(path, output=None, **kwargs):
    """Load a data file, train its network on its samples and save it back."""
    data = load_data(path)
    result = train_data(data, **kwargs)
    evaluate(data.network, data.inputs, data.target_outputs)
    save_model(data, output or path)
    return result


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python -m neuralnet.training <data file> [<output file>]", file=sys.stderr)
        sys.exit(2)

    run(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
