"""
Command-line entry point.

Loads the meeting file, asks which meeting to join and launches it.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from mtg import __version__
from mtg.config import Settings, load_config
from mtg.core.exceptions import ConfigurationError, MtgException
from mtg.core.logging import get_logger, setup_logging
from mtg.launcher import LinkDispatcher, ProcessLauncher, SubprocessLauncher
from mtg.models import LaunchCommand
from mtg.registry import build_registry
from mtg.selector import ConsoleSelector


logger = get_logger("main")

app = typer.Typer(
    name="mtg",
    help="Launch the desired meeting in the appropriate video call application or web browser",
    add_completion=False,
)


def run(
    settings: Settings,
    selector: Optional[ConsoleSelector] = None,
    launcher: Optional[ProcessLauncher] = None,
    platform: Optional[str] = None,
) -> LaunchCommand:
    """
    Run one load -> select -> launch cycle.

    Args:
        settings: Launcher settings.
        selector: Prompt used to pick a meeting.
        launcher: Runs the external opener.
        platform: sys.platform style name (current platform when omitted).

    Returns:
        The command that was launched.
    """
    config = load_config(
        settings.config_path,
        settings.template_path,
        strict=settings.strict,
    )
    registry = build_registry(config)

    # Fails on unsupported platforms before the prompt is shown
    dispatcher = LinkDispatcher(
        registry,
        config,
        launcher or SubprocessLauncher(),
        platform=platform,
    )

    selector = selector or ConsoleSelector()
    name = selector.select(registry.names())
    return dispatcher.dispatch(name)


def error(message: str) -> None:
    """Print an error in bold red on stderr."""
    typer.secho(message, fg=typer.colors.RED, bold=True, err=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mtg {__version__}")
        raise typer.Exit()


@app.command()
def main(
    config_file: Optional[Path] = typer.Option(
        None, "--env-file", "-e", help="Meeting file (default: ~/mtg/.env)"
    ),
    template_file: Optional[Path] = typer.Option(
        None, "--template", "-t", help="Required-keys template (default: ~/mtg/.env.defaults)"
    ),
    allow_empty: bool = typer.Option(
        False, "--allow-empty", help="Accept empty values for required keys"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Choose a meeting and join it."""
    overrides = {}
    if config_file is not None:
        overrides["config_file"] = config_file
    if template_file is not None:
        overrides["template_file"] = template_file
    if allow_empty:
        overrides["allow_empty_values"] = True
    if verbose:
        overrides["log_level"] = "DEBUG"

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        error(f"Invalid settings: {e}")
        raise typer.Exit(code=ConfigurationError.exit_code)

    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError as e:
        error(f"Cannot write log file {settings.log_file}: {e}")
        raise typer.Exit(code=ConfigurationError.exit_code)

    try:
        command = run(settings)
    except MtgException as e:
        logger.debug(f"{type(e).__name__}: {e.details}")
        error(e.message)
        raise typer.Exit(code=e.exit_code)

    logger.debug(f"Dispatched: {command}")


if __name__ == "__main__":
    app()
