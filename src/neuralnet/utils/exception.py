"""
Exceptions raised by the neuralnet package.

Every error is logged with as much location detail as is available when it
is created, then propagated to the caller. Nothing is retried.
"""

import os
import sys

from neuralnet.utils.logger import logger


def error_message_detail(error, error_detail: sys):
    """
    Build a detailed error message including file name, line number,
    and original exception message.

    The location is only known while an exception is being handled; outside
    an except block the plain message is returned.
    """
    _, _, exc_tb = error_detail.exc_info()
    if exc_tb is None:
        return str(error)

    while exc_tb.tb_next is not None:
        exc_tb = exc_tb.tb_next
    file_name = exc_tb.tb_frame.f_code.co_filename

    try:
        relative_path = os.path.relpath(file_name, os.getcwd())
    except ValueError:
        # Different drive on Windows
        relative_path = file_name

    return (
        f"Error in script: {relative_path}, "
        f"line: {exc_tb.tb_lineno}, "
        f"message: {str(error)}"
    )


class NetworkError(Exception):
    """
    Base class for neuralnet errors.
    Logs detailed error information when created.
    """

    prefix = ""

    def __init__(self, error_message, error_detail: sys = sys):
        error_message = f"{self.prefix}{error_message}"
        super().__init__(error_message)
        self.message = str(error_message)
        self.error_message = error_message_detail(
            error_message, error_detail=error_detail
        )
        logger.error(self.error_message)

    def __str__(self):
        return self.message


class InvalidArgumentError(NetworkError, ValueError):
    """A vector, topology or sample set has the wrong shape or content."""


class FormatError(NetworkError):
    """Serialized network data is malformed or incomplete."""

    prefix = "Invalid network format: "
