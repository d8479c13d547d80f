"""
Link Dispatcher

Turns a selected meeting name into a single launch:
- Google Meet links open with LAUNCH_VIDEO_CMD when it is executable,
  otherwise with the OS default opener
- Everything else is treated as Zoom and rewritten to a zoommtg:// deep link
"""

from __future__ import annotations

from mtg.core.exceptions import InvalidZoomUrlError, UnknownMeetingError
from mtg.core.logging import get_logger
from mtg.launcher.links import detect_platform_from_url, parse_zoom_url
from mtg.launcher.process import ProcessLauncher, default_opener
from mtg.models import LaunchCommand, MeetingConfig, MeetingPlatform, MeetingRegistry


logger = get_logger("dispatcher")


class LinkDispatcher:
    """Classifies a meeting URL and launches it."""

    def __init__(
        self,
        registry: MeetingRegistry,
        config: MeetingConfig,
        launcher: ProcessLauncher,
        platform: str | None = None,
    ):
        self.registry = registry
        self.config = config
        self.launcher = launcher
        self.opener = default_opener(platform)

    def build_launch_command(self, name: str) -> LaunchCommand:
        """
        Work out what to run for a meeting, without running it.

        Raises:
            UnknownMeetingError: the name has no URL.
            InvalidZoomUrlError: a non-Meet URL without a Zoom id and pwd.
        """
        url = self.registry.get(name)
        if not url:
            raise UnknownMeetingError(name, self.registry.names())

        platform = detect_platform_from_url(url)
        logger.debug(f"Meeting '{name}' classified as {platform.value}")

        if platform is MeetingPlatform.GOOGLE_MEET:
            return LaunchCommand(self._meet_command(), (url,))

        zoom = parse_zoom_url(url)
        if zoom is None:
            raise InvalidZoomUrlError(name, url)
        return LaunchCommand(self.opener, (zoom.deep_link,))

    def dispatch(self, name: str) -> LaunchCommand:
        """Build the launch command for ``name`` and run it."""
        command = self.build_launch_command(name)
        logger.info(f"Launching '{name}' with {command.command}")
        self.launcher.run(command)
        return command

    def _meet_command(self) -> str:
        cmd = self.config.launch_video_cmd
        if cmd and self.launcher.is_executable(cmd):
            return cmd
        if cmd:
            logger.info(f"LAUNCH_VIDEO_CMD '{cmd}' is not executable, using {self.opener}")
        return self.opener
