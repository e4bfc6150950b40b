"""
Logging setup for the web_validate command-line tools.
"""

import logging
import time
from pathlib import Path

from web_validate.utils.tqdm_logging import setup_tqdm_logging

PACKAGE_LOGGER = "web_validate"


def setup_logging(
    command_name: str,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> logging.Logger:
    """
    Set up logging for a command.

    Console output goes through tqdm.write() so it never breaks a progress
    bar. With log_dir, DEBUG and above are also written to a timestamped file.

    Args:
        command_name: Name of the command (for logger and log file naming)
        verbose: If True, show DEBUG messages (e.g. per-domain rejections) on console
        log_dir: Optional directory for log files

    Returns:
        Configured logger instance
    """
    console_level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(command_name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = []
    logger.propagate = False

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(logging.DEBUG)
    pkg_logger.handlers = []
    pkg_logger.propagate = False

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{command_name}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
        pkg_logger.addHandler(file_handler)

    setup_tqdm_logging(logger, console_level=console_level)
    # Library messages: warnings always, details only when verbose
    setup_tqdm_logging(pkg_logger, console_level=logging.DEBUG if verbose else logging.WARNING)

    for noisy_logger in ["urllib3", "filelock", "tldextract"]:
        logging.getLogger(noisy_logger).setLevel(logging.ERROR)

    return logger
