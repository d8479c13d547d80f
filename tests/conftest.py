"""Shared fixtures for meeting launcher tests.

Provides:
- Meeting file and template writers backed by tmp_path
- A recording ProcessLauncher test double
- A scripted prompt for the selector
- Logger reset so caplog sees mtg records
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mtg.core.logging import LOGGER_NAME
from mtg.models import LaunchCommand


class FakeLauncher:
    """Records commands instead of starting processes."""

    def __init__(self, executables: set[str] | None = None, status: int = 0):
        self.executables = set(executables or ())
        self.status = status
        self.probed: list[str] = []
        self.commands: list[LaunchCommand] = []

    def is_executable(self, command: str) -> bool:
        self.probed.append(command)
        return command in self.executables

    def run(self, command: LaunchCommand) -> int:
        self.commands.append(command)
        return self.status


class ScriptedPrompt:
    """Answers prompts from a fixed list; raises EOFError when exhausted."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.asked: list[str] = []

    def __call__(self, text: str) -> str:
        self.asked.append(text)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def write_env(path: Path, lines: dict[str, str]) -> Path:
    path.write_text("".join(f"{key}={value}\n" for key, value in lines.items()), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_mtg_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def meeting_file(tmp_path: Path) -> Path:
    return write_env(tmp_path / ".env", {
        "MEET_STANDUP": "https://meet.google.com/abc-defg-hij",
        "ZOOM_RETRO": "https://zoom.us/j/1234567890?pwd=AbC123",
        "TEAM_NAME": "platform",
    })


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    return write_env(tmp_path / ".env.defaults", {"MEET_STANDUP": "", "ZOOM_RETRO": ""})
