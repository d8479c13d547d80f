"""
Utility functions for classifying meeting URLs and building Zoom deep links.
"""

import re
from typing import Optional

from mtg.models import MeetingPlatform, ZoomMeeting


GOOGLE_MEET_HOST = "meet.google.com"

# Conference number, then the pwd query parameter somewhere after it
ZOOM_URL_PATTERN = re.compile(r"zoom\.us/j/(\d+).+?pwd=(\w+)", re.ASCII)


def detect_platform_from_url(url: str) -> MeetingPlatform:
    """
    Detect the meeting platform from a URL.

    Anything that is not a Google Meet link is treated as Zoom.

    Args:
        url: Meeting URL.

    Returns:
        MeetingPlatform enum value.
    """
    if GOOGLE_MEET_HOST in url:
        return MeetingPlatform.GOOGLE_MEET
    return MeetingPlatform.ZOOM


def parse_zoom_url(url: str) -> Optional[ZoomMeeting]:
    """
    Extract the conference number and password from a Zoom web URL.

    Args:
        url: Zoom URL such as https://zoom.us/j/123?pwd=abc

    Returns:
        ZoomMeeting, or None if the URL does not match.
    """
    match = ZOOM_URL_PATTERN.search(url)
    if not match:
        return None
    return ZoomMeeting(conference_id=match.group(1), password=match.group(2))


def zoom_deep_link(url: str) -> Optional[str]:
    """zoommtg:// link for a Zoom web URL, or None if it cannot be parsed."""
    meeting = parse_zoom_url(url)
    return meeting.deep_link if meeting else None
