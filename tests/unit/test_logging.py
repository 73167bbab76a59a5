# tests/unit/test_logging.py
"""
Unit tests for logging setup.
"""

import logging
import sys

import pytest

from kube_endpoint.utils import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_level_and_stderr_handler(self):
        setup_logging("debug")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("verbose")
        assert logging.getLogger().level == logging.INFO

    def test_repeated_setup_replaces_handlers(self):
        setup_logging("info")
        setup_logging("warning")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "endpoint.log"
        setup_logging("info", str(log_file))
        get_logger("kube_endpoint.test").info("built endpoint")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "kube_endpoint.test - INFO - built endpoint" in log_file.read_text()
        logging.getLogger().handlers[1].close()
