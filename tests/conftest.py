"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest


class FakePrompt:
    """Scripted stand-in for the terminal multi-select.

    Each answer is a list of indices, or None to accept the defaults.
    Every call is recorded for assertions.
    """

    def __init__(self, *answers: list[int] | None) -> None:
        self.answers = list(answers)
        self.calls: list[dict] = []

    def __call__(self, title, empty_error, options, defaults):
        self.calls.append(
            {
                "title": title,
                "empty_error": empty_error,
                "options": list(options),
                "defaults": list(defaults),
            }
        )
        answer = self.answers.pop(0)
        if answer is None:
            return [i for i, d in enumerate(defaults) if d]
        return list(answer)


@pytest.fixture
def fake_prompt():
    """Factory: ``fake_prompt([0], None, ...)`` → FakePrompt."""
    return FakePrompt


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a proofkit.yml into tmp_path and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "proofkit.yml"
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
