"""
Tqdm-compatible logging utilities.

Routes log messages through tqdm.write() so they don't break the progress
bar shown while validating large domain files.
"""

import logging
import sys
from typing import TextIO

from tqdm import tqdm


class TqdmLoggingHandler(logging.Handler):
    """
    Logging handler that writes through tqdm.write() to avoid progress bar interference.

    Usage:
        handler = TqdmLoggingHandler(level=logging.INFO)
        logger.addHandler(handler)
    """

    def __init__(self, level: int = logging.NOTSET, stream: TextIO | None = None):
        """
        Initialize the handler.

        Args:
            level: Minimum logging level to handle
            stream: Output stream (default: sys.stderr for tqdm compatibility)
        """
        super().__init__(level)
        self.stream = stream or sys.stderr

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through tqdm.write()."""
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream)
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


def setup_tqdm_logging(
    logger_instance: logging.Logger,
    console_level: int = logging.INFO,
) -> logging.Handler:
    """
    Configure a logger to use tqdm-compatible console output.

    Replaces any existing StreamHandler (file handlers are kept).

    Args:
        logger_instance: Logger to configure
        console_level: Minimum level for console output

    Returns:
        The added console handler
    """
    for handler in logger_instance.handlers[:]:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            logger_instance.removeHandler(handler)

    handler = TqdmLoggingHandler(level=console_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger_instance.addHandler(handler)
    return handler
