# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

from dead_links.logger import LOGGER_NAME, get_logger, init_logging


def test_init_logging_replaces_previous_handlers():
    try:
        first = init_logging(level="DEBUG")
        second = init_logging(level="ERROR")

        assert first is second is logging.getLogger(LOGGER_NAME)
        assert len(second.handlers) == 1
        assert second.level == logging.ERROR
        assert second.propagate is False
    finally:
        init_logging()


def test_log_file_gets_records(tmp_path):
    log_file = tmp_path / "crawl.log"
    try:
        crawl_logger = init_logging(level="INFO", log_file=log_file)
        assert any(isinstance(h, RotatingFileHandler) for h in crawl_logger.handlers)

        get_logger().info("Dead link on %s: %s", "https://example.test/a", "https://example.test/b")
        for handler in crawl_logger.handlers:
            handler.flush()
    finally:
        init_logging()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO" in text
    assert "Dead link on https://example.test/a: https://example.test/b" in text
