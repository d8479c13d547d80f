"""
Data models for meeting configuration and launching.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


LAUNCH_VIDEO_CMD_KEY = "LAUNCH_VIDEO_CMD"


class MeetingPlatform(str, Enum):
    """Supported meeting platforms."""
    GOOGLE_MEET = "google_meet"
    ZOOM = "zoom"


@dataclass(frozen=True)
class ConfigEntry:
    """A single KEY=value pair from the meeting file."""
    key: str
    value: str


@dataclass(frozen=True)
class MeetingConfig:
    """
    Configuration loaded from the meeting file.

    Built once per run and handed to each component.
    """
    values: Mapping[str, str] = field(default_factory=dict)
    source: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def from_entries(cls, entries: List[ConfigEntry], source: Optional[str] = None) -> "MeetingConfig":
        return cls({entry.key: entry.value for entry in entries}, source=source)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)

    @property
    def launch_video_cmd(self) -> Optional[str]:
        """Preferred executable for Google Meet links, if configured."""
        cmd = (self.values.get(LAUNCH_VIDEO_CMD_KEY) or "").strip()
        return cmd or None


class MeetingRegistry(Mapping[str, str]):
    """Read-only mapping of meeting name to meeting URL."""

    def __init__(self, meetings: Optional[Dict[str, str]] = None):
        self._meetings = MappingProxyType(dict(meetings or {}))

    def __getitem__(self, name: str) -> str:
        return self._meetings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._meetings)

    def __len__(self) -> int:
        return len(self._meetings)

    def __repr__(self) -> str:
        return f"MeetingRegistry({dict(self._meetings)!r})"

    def names(self) -> List[str]:
        """Meeting names in sorted order."""
        return sorted(self._meetings)


@dataclass(frozen=True)
class LaunchCommand:
    """An external process invocation."""
    command: str
    args: Tuple[str, ...] = ()

    @property
    def argv(self) -> List[str]:
        return [self.command, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class ZoomMeeting:
    """Conference number and password parsed from a Zoom web URL."""
    conference_id: str
    password: str

    @property
    def deep_link(self) -> str:
        """Native app link using the zoommtg:// scheme."""
        return (
            "zoommtg://zoom.us/join?action=join"
            f"&confno={self.conference_id}&pwd={self.password}"
        )
