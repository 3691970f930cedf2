import numpy as np

from .losses import squared_error, mean_squared_error
from neuralnet.utils.exception import InvalidArgumentError
from neuralnet.utils.logger import logger


def evaluate(network, inputs, target_outputs, threshold=0.5):
    """
    Measure a network on a sample set without training it.

    Returns the mean per-sample squared error (same definition as the
    network's recent_average_error) and the fraction of output values that
    land on the same side of `threshold` as their target.
    """
    if len(inputs) != len(target_outputs):
        raise InvalidArgumentError(
            f"{len(inputs)} input sets but {len(target_outputs)} target output sets")

    errors = []
    predictions = []
    for sample_in, sample_out in zip(inputs, target_outputs):
        outputs = network.predict(sample_in)
        errors.append(squared_error(sample_out, outputs))
        predictions.append(outputs)

    if not errors:
        y_true = y_pred = np.zeros(0)
    else:
        y_true = (np.asarray(target_outputs, dtype=float) >= threshold).ravel()
        y_pred = (np.asarray(predictions, dtype=float) >= threshold).ravel()

    TP, FP, FN, TN = compute_confusion(y_true, y_pred)
    acc = accuracy_score(TP, FP, FN, TN)
    mean_error = mean_squared_error(errors)

    logger.info(f"Evaluated {len(errors)} samples: mean error {mean_error:.6f}, accuracy {acc:.4f}")

    return {
        "mean_error": mean_error,
        "accuracy": float(acc),
        "samples": len(errors),
        "TP": int(TP),
        "FP": int(FP),
        "FN": int(FN),
        "TN": int(TN)
    }

def compute_confusion(y_true, y_pred):
    y_true = np.asarray(y_true).astype(int)
    y_pred = np.asarray(y_pred).astype(int)

    TP = np.sum((y_true == 1) & (y_pred == 1))
    TN = np.sum((y_true == 0) & (y_pred == 0))
    FP = np.sum((y_true == 0) & (y_pred == 1))
    FN = np.sum((y_true == 1) & (y_pred == 0))

    return TP, FP, FN, TN


def accuracy_score(TP, FP, FN, TN):
    total = TP + FP + FN + TN
    if total == 0:
        return 0.0
    return (TP + TN) / total
