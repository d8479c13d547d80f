"""
Core module exports.
"""

from .exceptions import (
    MtgException,
    ConfigurationError,
    ConfigurationNotFoundError,
    MissingConfigurationError,
    EmptyValueError,
    UnsupportedPlatformError,
    NoSelectionError,
    NoMeetingsConfiguredError,
    UnknownMeetingError,
    InvalidZoomUrlError,
    LaunchError,
)
from .logging import get_logger, setup_logging

__all__ = [
    "MtgException",
    "ConfigurationError",
    "ConfigurationNotFoundError",
    "MissingConfigurationError",
    "EmptyValueError",
    "UnsupportedPlatformError",
    "NoSelectionError",
    "NoMeetingsConfiguredError",
    "UnknownMeetingError",
    "InvalidZoomUrlError",
    "LaunchError",
    "get_logger",
    "setup_logging",
]
