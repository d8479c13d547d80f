"""
Builds the meeting registry from MEET_<name> and ZOOM_<name> keys.
"""

import re
from typing import Dict

from mtg.core.logging import get_logger
from mtg.models import MeetingConfig, MeetingRegistry


logger = get_logger("registry")

MEETING_KEY_PATTERN = re.compile(r"^(MEET|ZOOM)_(.+)$")


def build_registry(config: MeetingConfig) -> MeetingRegistry:
    """
    Map lowercase meeting names to URLs.

    The key prefix does not decide the provider; the URL does. Keys are
    visited in lexicographic order so that when two keys share a name
    (MEET_X and ZOOM_X) the later one wins the same way on every run.

    Args:
        config: Loaded configuration.

    Returns:
        MeetingRegistry of name -> URL.
    """
    meetings: Dict[str, str] = {}
    owners: Dict[str, str] = {}

    for key in sorted(config.values):
        match = MEETING_KEY_PATTERN.match(key)
        if not match:
            continue

        name = match.group(2).lower()
        if name in meetings:
            logger.warning(f"Meeting '{name}' defined by both {owners[name]} and {key}; using {key}")
        meetings[name] = config.values[key]
        owners[name] = key

    logger.debug(f"Registry built with {len(meetings)} meetings")
    return MeetingRegistry(meetings)
