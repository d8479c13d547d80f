"""
Configuration module for the meeting launcher.
"""

from .settings import Settings
from .loader import load_config, read_entries, required_keys, validate

__all__ = [
    "Settings",
    "load_config",
    "read_entries",
    "required_keys",
    "validate",
]
