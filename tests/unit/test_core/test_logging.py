"""
test_logging.py - 콘솔 로깅 설정 테스트
"""

import logging

import pytest

from src.core.logging import ConsoleHandler, resolve_level, setup_logging


class TestResolveLevel:
    """resolve_level 테스트."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("Warning", logging.WARNING),
            (logging.ERROR, logging.ERROR),
            (None, logging.INFO),
            ("nonsense", logging.INFO),
        ],
    )
    def test_levels(self, level, expected):
        assert resolve_level(level) == expected


class TestSetupLogging:
    """setup_logging 테스트."""

    def test_sets_level(self):
        logger = setup_logging("WARNING")

        assert logger.name == "src"
        assert logger.level == logging.WARNING

    def test_handler_not_duplicated(self):
        logger = setup_logging("INFO")
        count = len(logger.handlers)

        setup_logging("DEBUG")

        assert len(logger.handlers) == count
        assert logger.level == logging.DEBUG

    def test_single_console_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")

        handlers = [h for h in logging.getLogger("src").handlers if isinstance(h, ConsoleHandler)]

        assert len(handlers) == 1

    def test_core_loggers_propagate(self, caplog, storage_dir):
        """core 모듈 로그가 src 로거를 통해 전달됨."""
        from src.core.listing import list_directory

        setup_logging("INFO")
        with caplog.at_level(logging.INFO, logger="src"):
            list_directory(storage_dir)

        assert any("Listed directory" in r.getMessage() for r in caplog.records)
