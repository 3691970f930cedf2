"""
Runtime configuration for the neuralnet project.

Values are read from the environment (a local .env file is loaded first).
Only logging and the training loop are configurable; the network itself
takes everything it needs as constructor arguments.
"""

import os

from dotenv import find_dotenv, load_dotenv


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_EPOCHS = 100000
DEFAULT_MAX_ERROR = 0.001
DEFAULT_REPORT_EVERY = 1000

_TRUE_VALUES = ("1", "true", "yes", "on")


class Settings:
    """Snapshot of the environment at load time."""

    def __init__(self, log_level=DEFAULT_LOG_LEVEL, log_to_file=False, log_dir=None,
                 max_epochs=DEFAULT_MAX_EPOCHS, max_error=DEFAULT_MAX_ERROR,
                 report_every=DEFAULT_REPORT_EVERY):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_dir = log_dir or os.path.join(os.getcwd(), "logs")
        self.max_epochs = max_epochs
        self.max_error = max_error
        self.report_every = report_every
        # Filled by load_settings, reported once logging is up
        self.invalid = []

    def __repr__(self):
        return (f"Settings(log_level={self.log_level!r}, log_to_file={self.log_to_file}, "
                f"max_epochs={self.max_epochs}, max_error={self.max_error}, "
                f"report_every={self.report_every})")


def _number(name, cast, default, invalid):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        invalid.append(f"{name}={raw!r}")
        return default


def load_settings():
    """Read NEURALNET_* variables, falling back to defaults for anything unset or invalid."""
    # Search from the working directory, not from where the package is installed
    load_dotenv(find_dotenv(usecwd=True))

    invalid = []
    settings = Settings(
        log_level=os.getenv("NEURALNET_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_to_file=os.getenv("NEURALNET_LOG_TO_FILE", "false").strip().lower() in _TRUE_VALUES,
        log_dir=os.getenv("NEURALNET_LOG_DIR"),
        max_epochs=_number("NEURALNET_MAX_EPOCHS", int, DEFAULT_MAX_EPOCHS, invalid),
        max_error=_number("NEURALNET_MAX_ERROR", float, DEFAULT_MAX_ERROR, invalid),
        report_every=_number("NEURALNET_REPORT_EVERY", int, DEFAULT_REPORT_EVERY, invalid),
    )
    settings.invalid = invalid
    return settings


settings = load_settings()
