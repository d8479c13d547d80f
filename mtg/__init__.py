"""
mtg - meeting launcher.
Pick a configured Google Meet or Zoom meeting and open it.
"""

__version__ = "0.1.0"

from .models import (
    ConfigEntry,
    LaunchCommand,
    MeetingConfig,
    MeetingPlatform,
    MeetingRegistry,
    ZoomMeeting,
)
from .registry import build_registry

__all__ = [
    "__version__",
    "ConfigEntry",
    "LaunchCommand",
    "MeetingConfig",
    "MeetingPlatform",
    "MeetingRegistry",
    "ZoomMeeting",
    "build_registry",
]
