"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from proofkit.core.observability.logging_config import _parse_level, setup_logging


@pytest.fixture(autouse=True)
def _restore(restore_root_logger):
    yield


class TestParseLevel:
    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("INFO", logging.INFO), ("error", logging.ERROR)],
    )
    def test_known(self, name, expected):
        assert _parse_level(name) == expected

    @pytest.mark.parametrize("name", [None, "", "loud", "basicConfig"])
    def test_fallback(self, name):
        assert _parse_level(name) == logging.WARNING


class TestSetupLogging:
    def test_console_level(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_minimal_format_at_warning(self):
        setup_logging("WARNING")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert fmt == "%(message)s"

    def test_debug_format_has_lineno(self):
        setup_logging("DEBUG")
        fmt = logging.getLogger().handlers[0].formatter._fmt
        assert "%(lineno)d" in fmt

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "proofkit.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("proofkit.test").debug("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()
