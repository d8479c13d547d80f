"""End-to-end tests for the mtg command.

The real opener is replaced with FakeLauncher and the platform pinned to
Linux, so prompts are driven through CliRunner input.
"""

from __future__ import annotations

import sys

import pytest
from typer.testing import CliRunner

import mtg.main as cli
from mtg import __version__
from mtg.config import Settings
from mtg.core.exceptions import (
    ConfigurationError,
    EmptyValueError,
    InvalidZoomUrlError,
    MissingConfigurationError,
    NoSelectionError,
    UnsupportedPlatformError,
)
from tests.conftest import FakeLauncher, ScriptedPrompt, write_env


runner = CliRunner()


@pytest.fixture
def launcher(monkeypatch) -> FakeLauncher:
    fake = FakeLauncher()
    monkeypatch.setattr(cli, "SubprocessLauncher", lambda: fake)
    monkeypatch.setattr(sys, "platform", "linux")
    for var in ("MTG_LOG_FILE", "MTG_LOG_LEVEL", "MTG_ALLOW_EMPTY_VALUES"):
        monkeypatch.delenv(var, raising=False)
    return fake


def _invoke(meeting_file, template_file, answers: str, *extra: str):
    return runner.invoke(
        cli.app,
        ["--env-file", str(meeting_file), "--template", str(template_file), *extra],
        input=answers,
    )


def test_zoom_meeting_is_launched_as_deep_link(launcher, meeting_file, template_file):
    result = _invoke(meeting_file, template_file, "retro\n")

    assert result.exit_code == 0, result.output
    assert [c.argv for c in launcher.commands] == [
        ["xdg-open", "zoommtg://zoom.us/join?action=join&confno=1234567890&pwd=AbC123"],
    ]


def test_meeting_list_is_shown_sorted(launcher, meeting_file, template_file):
    result = _invoke(meeting_file, template_file, "2\n")

    assert result.exit_code == 0, result.output
    assert result.output.index("1) retro") < result.output.index("2) standup")
    assert launcher.commands[0].argv == ["xdg-open", "https://meet.google.com/abc-defg-hij"]


def test_cancel_exits_non_zero_without_launch(launcher, meeting_file, template_file):
    result = _invoke(meeting_file, template_file, "\n")

    assert result.exit_code == NoSelectionError.exit_code
    assert "No meeting selected." in result.output
    assert launcher.commands == []


def test_end_of_input_exits_non_zero(launcher, meeting_file, template_file):
    result = _invoke(meeting_file, template_file, "")

    assert result.exit_code == NoSelectionError.exit_code
    assert launcher.commands == []


def test_missing_required_keys_fail_before_prompt(launcher, tmp_path, meeting_file):
    template = write_env(tmp_path / "strict.defaults", {"ZOOM_PLANNING": ""})

    result = _invoke(meeting_file, template, "1\n")

    assert result.exit_code == MissingConfigurationError.exit_code
    assert "ZOOM_PLANNING" in result.output
    assert "Choose a meeting" not in result.output


def test_allow_empty_flag_disables_strict_mode(launcher, tmp_path):
    env = write_env(tmp_path / ".env", {"MEET_A": "https://meet.google.com/a", "LAUNCH_VIDEO_CMD": ""})
    template = write_env(tmp_path / ".env.defaults", {"LAUNCH_VIDEO_CMD": ""})

    strict = _invoke(env, template, "1\n")
    relaxed = _invoke(env, template, "1\n", "--allow-empty")

    assert strict.exit_code == EmptyValueError.exit_code
    assert relaxed.exit_code == 0, relaxed.output


def test_invalid_zoom_url_reports_key(launcher, tmp_path):
    env = write_env(tmp_path / ".env", {"ZOOM_BROKEN": "https://zoom.us/j/123"})

    result = _invoke(env, tmp_path / "none.defaults", "broken\n")

    assert result.exit_code == InvalidZoomUrlError.exit_code
    assert "'broken'" in result.output
    assert launcher.commands == []


def test_missing_meeting_file(launcher, tmp_path):
    result = _invoke(tmp_path / "missing.env", tmp_path / "none.defaults", "")

    assert result.exit_code != 0
    assert "Configuration file not found" in result.output


def test_version():
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_run_rejects_unsupported_platform_before_prompt(meeting_file, template_file):
    prompt = ScriptedPrompt("1")
    settings = Settings(config_file=meeting_file, template_file=template_file)

    with pytest.raises(UnsupportedPlatformError):
        cli.run(
            settings,
            selector=cli.ConsoleSelector(prompt=prompt, echo=lambda _line: None),
            launcher=FakeLauncher(),
            platform="win32",
        )
    assert prompt.asked == []


def test_unwritable_log_file_is_reported(launcher, monkeypatch, tmp_path, meeting_file, template_file):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("MTG_LOG_FILE", str(blocker / "mtg.log"))

    result = _invoke(meeting_file, template_file, "1\n")

    assert result.exit_code == ConfigurationError.exit_code
    assert "Cannot write log file" in result.output
    assert launcher.commands == []
