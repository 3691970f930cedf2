from .logger import logger
from .exception import NetworkError, InvalidArgumentError, FormatError

__all__ = ["logger", "NetworkError", "InvalidArgumentError", "FormatError"]
