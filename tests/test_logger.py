"""Tests for the shared logger setup."""

import logging

from utils import logger as logger_module
from utils.logger import get_logger


class TestGetLogger:

    def test_returns_named_logger(self):
        assert get_logger("repositories.visitor_repo").name == "repositories.visitor_repo"

    def test_root_handler_added_once(self):
        get_logger("a")
        before = len(logging.getLogger().handlers)
        get_logger("b")

        assert logger_module._initialized
        assert len(logging.getLogger().handlers) == before
