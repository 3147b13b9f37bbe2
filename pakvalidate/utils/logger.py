"""
Logging setup

[Usage]
    from pakvalidate.utils.logger import logger, get_logger

    log = get_logger('PakValidate.batch')
    log.debug("...")

Level and optional log file come from Config (pakvalidate.json or the
PAKVALIDATE_LOG_LEVEL / PAKVALIDATE_LOG_FILE environment variables).
"""
import logging
from typing import Optional

from ..core.config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = __name__, log_file: Optional[str] = None,
                 config: Optional[Config] = None) -> logging.Logger:
    """Configure and return a logger. A logger that already has handlers is returned as-is."""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    if config is None:
        config = Config()

    level = config.get_log_level()
    if log_file is None:
        log_file = config.get_log_file()

    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler, only when a log file is configured
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger (alias of setup_logger)"""
    if name is None:
        return logger
    return setup_logger(name)


# Default logger
logger = setup_logger('PakValidate')
