"""
Meeting link classification and launching.
"""

from .dispatcher import LinkDispatcher
from .links import detect_platform_from_url, parse_zoom_url, zoom_deep_link
from .process import OS_OPENERS, ProcessLauncher, SubprocessLauncher, default_opener

__all__ = [
    "LinkDispatcher",
    "detect_platform_from_url",
    "parse_zoom_url",
    "zoom_deep_link",
    "OS_OPENERS",
    "ProcessLauncher",
    "SubprocessLauncher",
    "default_opener",
]
