"""
Pytest configuration and shared fixtures.
"""

import logging
import sys
from typing import Sequence

import pytest
from unittest.mock import MagicMock


class FakeRunner:
    """Command runner that records commands instead of spawning anything."""

    def __init__(self, returncode: int = 0, output: str = "", error: Exception | None = None):
        self.returncode = returncode
        self.output = output
        self.error = error
        self.calls: list[str | list[str]] = []

    def run(self, command: str | Sequence[str]) -> int:
        self.calls.append(command if isinstance(command, str) else list(command))
        if self.error is not None:
            raise self.error
        if self.output:
            sys.stdout.write(self.output)
        return self.returncode


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def fake_runner():
    """
    Create a runner that never spawns a process.

    Returns:
        FakeRunner printing a fake listing
    """
    return FakeRunner(output="LISTING\n")


@pytest.fixture
def make_runner():
    """
    Factory for runners with a chosen exit status, output or error.

    Returns:
        The FakeRunner class
    """
    return FakeRunner


@pytest.fixture(autouse=True)
def plain_console_env(monkeypatch):
    """Keep rich from forcing colour or terminal mode in captured output."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_level():
    """Put the root logger level back after a test that runs cli.main."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
