"""
Handler setup for the `polytope_engine` logger namespace.

Library modules only call `logging.getLogger(__name__)`; the process front end
(the command line tool) decides where records go by calling `setup_logging`.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "polytope_engine"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route engine log records to stderr, and to log_file when given.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Threshold for the namespace logger and its handlers
        log_file: Optional path; the file is truncated on open

    Returns:
        The configured namespace logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
