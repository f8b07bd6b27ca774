"""Tests for logging setup."""

from __future__ import annotations

import logging

from pcremote.config.settings import LoggingConfig
from pcremote.utils.logging import setup_logging


class TestSetupLogging:
    def test_sets_level_and_handler(self) -> None:
        setup_logging(LoggingConfig(level="debug"))
        logger = logging.getLogger("pcremote")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_does_not_stack_handlers(self, tmp_path) -> None:
        setup_logging()
        setup_logging(LoggingConfig(file=str(tmp_path / "pcremote.log")))
        logger = logging.getLogger("pcremote")
        assert len(logger.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        setup_logging()
