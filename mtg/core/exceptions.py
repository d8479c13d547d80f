"""
Custom exceptions for the meeting launcher.
"""

from typing import Any, Dict, Iterable, Optional


class MtgException(Exception):
    """Base exception for meeting launcher errors."""

    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(MtgException):
    """Raised when configuration is invalid."""
    exit_code = 2


class ConfigurationNotFoundError(ConfigurationError):
    """Raised when the meeting file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Configuration file not found: {path}",
            {"path": path},
        )


class MissingConfigurationError(ConfigurationError):
    """Raised when keys listed in the template are absent."""

    def __init__(self, missing_keys: Iterable[str]):
        self.missing_keys = sorted(missing_keys)
        super().__init__(
            f"Missing required configuration keys: {', '.join(self.missing_keys)}",
            {"missing_keys": self.missing_keys},
        )


class EmptyValueError(ConfigurationError):
    """Raised when a required key is set to an empty value in strict mode."""

    def __init__(self, empty_keys: Iterable[str]):
        self.empty_keys = sorted(empty_keys)
        super().__init__(
            f"Configuration keys must not be empty: {', '.join(self.empty_keys)}",
            {"empty_keys": self.empty_keys},
        )


class UnsupportedPlatformError(MtgException):
    """Raised on any OS other than macOS or Linux."""
    exit_code = 3

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(
            f"{platform} is not supported by this script. Please use a Linux or Mac machine.",
            {"platform": platform},
        )


class NoSelectionError(MtgException):
    """Raised when the user cancels the meeting prompt."""
    exit_code = 4

    def __init__(self, message: str = "No meeting selected."):
        super().__init__(message)


class NoMeetingsConfiguredError(NoSelectionError):
    """Raised when there is nothing to choose from."""

    def __init__(self):
        super().__init__(
            "No meetings configured. Add MEET_<NAME> or ZOOM_<NAME> entries to your configuration file."
        )


class UnknownMeetingError(MtgException):
    """Raised when the selected name has no URL."""
    exit_code = 5

    def __init__(self, meeting_name: str, valid_names: Iterable[str]):
        self.meeting_name = meeting_name
        self.valid_names = sorted(valid_names)
        super().__init__(
            "Couldn't find or parse the Zoom or Google Meet link that you entered. "
            f"Here are the valid calls:\n{', '.join(self.valid_names)}",
            {"meeting_name": meeting_name, "valid_names": self.valid_names},
        )


class InvalidZoomUrlError(MtgException):
    """Raised when a Zoom URL cannot be turned into a deep link."""
    exit_code = 6

    def __init__(self, meeting_name: str, url: str):
        self.meeting_name = meeting_name
        self.url = url
        super().__init__(
            f"The Zoom URL that we have saved for '{meeting_name}' is invalid. "
            "Please check the URL to make sure it is a valid Zoom URL and try again.",
            {"meeting_name": meeting_name, "url": url},
        )


class LaunchError(MtgException):
    """Raised when the opener process cannot be started."""
    exit_code = 7
