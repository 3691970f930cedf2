import numpy as np

def squared_error(targets, outputs):
    delta = np.asarray(targets, dtype=float) - np.asarray(outputs, dtype=float)
    return float(0.5 * np.sum(delta * delta))

def mean_squared_error(errors):
    errors = np.asarray(errors, dtype=float)
    if errors.size == 0:
        return 0.0
    return float(np.mean(errors))
