import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler

from neuralnet.utils.config import settings

# Log message format
LOG_FORMAT = "[ %(asctime)s ] %(name)s:%(lineno)d - %(levelname)s - %(message)s"

LOG_LEVEL = getattr(logging, settings.log_level, logging.INFO)

# Console handler (always on)
console_handler = logging.StreamHandler()
console_handler.setLevel(LOG_LEVEL)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

handlers = [console_handler]

LOG_FILE_PATH = None
if settings.log_to_file:
    os.makedirs(settings.log_dir, exist_ok=True)

    # A new log file for each run
    LOG_FILE = datetime.now().strftime("%Y_%m_%d_%H_%M_%S") + ".log"
    LOG_FILE_PATH = os.path.join(settings.log_dir, LOG_FILE)

    # File handler with rotation (5 MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        LOG_FILE_PATH,
        maxBytes=5_000_000,
        backupCount=5
    )
    file_handler.setLevel(LOG_LEVEL)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers.append(file_handler)

logging.basicConfig(
    level=LOG_LEVEL,
    handlers=handlers
)

# Shared logger instance for the whole package
logger = logging.getLogger("neuralnet")
logger.setLevel(LOG_LEVEL)

for entry in settings.invalid:
    logger.warning(f"Ignoring invalid configuration value {entry}, using default.")
