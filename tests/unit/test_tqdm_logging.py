"""
Unit tests for web_validate.utils.tqdm_logging.
"""

import io
import logging

from web_validate.utils.tqdm_logging import TqdmLoggingHandler, setup_tqdm_logging


class TestSetupTqdmLogging:
    """Tests for setup_tqdm_logging."""

    def test_replaces_stream_handlers_keeps_file_handlers(self, tmp_path):
        logger = logging.getLogger("web_validate_test.tqdm_setup")
        logger.handlers = []
        stream_handler = logging.StreamHandler(io.StringIO())
        file_handler = logging.FileHandler(tmp_path / "test.log", encoding="utf-8")
        logger.addHandler(stream_handler)
        logger.addHandler(file_handler)

        handler = setup_tqdm_logging(logger, console_level=logging.WARNING)

        assert isinstance(handler, TqdmLoggingHandler)
        assert handler.level == logging.WARNING
        assert stream_handler not in logger.handlers
        assert file_handler in logger.handlers
        assert handler in logger.handlers
        file_handler.close()
        logger.handlers = []

    def test_handler_writes_formatted_message(self):
        stream = io.StringIO()
        logger = logging.getLogger("web_validate_test.tqdm_emit")
        logger.handlers = []
        logger.propagate = False
        logger.setLevel(logging.INFO)
        handler = TqdmLoggingHandler(level=logging.INFO, stream=stream)
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(handler)

        logger.info("Loaded 6 TLDs")

        assert stream.getvalue() == "INFO Loaded 6 TLDs\n"
        logger.handlers = []
