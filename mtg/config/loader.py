"""
Loads the flat KEY=value meeting file and validates it against its template.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from dotenv import dotenv_values

from mtg.core.exceptions import (
    ConfigurationNotFoundError,
    EmptyValueError,
    MissingConfigurationError,
)
from mtg.core.logging import get_logger
from mtg.models import ConfigEntry, MeetingConfig


logger = get_logger("config")

PathLike = Union[str, Path]


def read_entries(path: PathLike) -> List[ConfigEntry]:
    """
    Parse a KEY=value file.

    Args:
        path: File to parse.

    Returns:
        Entries in file order. A key without a value maps to "".
    """
    values = dotenv_values(path, interpolate=False)
    return [ConfigEntry(key, value or "") for key, value in values.items()]


def required_keys(template_path: Optional[PathLike]) -> List[str]:
    """Keys listed in the template file, or none when it does not exist."""
    if template_path is None:
        return []
    template = Path(template_path)
    if not template.is_file():
        logger.warning(f"Template {template} not found, skipping required-key validation")
        return []
    return [entry.key for entry in read_entries(template)]


def validate(values: Dict[str, str], required: List[str], strict: bool = True) -> None:
    """
    Check that every required key is present (and non-empty in strict mode).

    Raises:
        MissingConfigurationError: one or more required keys are absent.
        EmptyValueError: strict mode and a required key is empty.
    """
    missing = [key for key in required if key not in values]
    if missing:
        raise MissingConfigurationError(missing)

    if strict:
        empty = [key for key in required if values[key] == ""]
        if empty:
            raise EmptyValueError(empty)


def load_config(
    path: PathLike,
    template_path: Optional[PathLike] = None,
    strict: bool = True,
) -> MeetingConfig:
    """
    Load and validate the meeting file.

    Args:
        path: Meeting file (KEY=value lines).
        template_path: File whose keys are all required in ``path``.
        strict: Reject empty values for required keys.

    Returns:
        The validated configuration.
    """
    config_path = Path(path).expanduser()
    if not config_path.is_file():
        raise ConfigurationNotFoundError(str(config_path))

    config = MeetingConfig.from_entries(read_entries(config_path), source=str(config_path))
    logger.debug(f"Loaded {len(config.values)} keys from {config_path}")

    required = required_keys(Path(template_path).expanduser() if template_path else None)
    validate(dict(config.values), required, strict=strict)

    return config
