# passive_view/core/settings.py

import json
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

from .data_holder import DEFAULT_HIGH, DEFAULT_LOW

logger = logging.getLogger(__name__)

# The default settings ship inside the package as `passive_view/config/settings.json`,
# so an installed copy finds them as well as a source checkout does.
SETTINGS_PACKAGE = "passive_view"
SETTINGS_RESOURCE = ("config", "settings.json")

DEFAULT_WINDOW_TITLE = " Passive View Sample"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    """Raised when the settings file holds values the application cannot use."""


@dataclass(frozen=True)
class AppSettings:
    """The user-tunable knobs of the sample."""
    low: int = DEFAULT_LOW
    high: int = DEFAULT_HIGH
    seed: Optional[int] = None
    window_title: str = DEFAULT_WINDOW_TITLE
    log_level: str = "INFO"


def _require_int(data: dict, key: str, default):
    value = data.get(key, default)
    # bool is a subclass of int, but `true` is never a sensible bound or seed.
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise SettingsError(f"Setting '{key}' must be an integer, got {value!r}.")
    return value


def settings_from_dict(data: dict) -> AppSettings:
    """
    Builds validated settings from a plain dictionary. Unknown keys are ignored.

    Raises:
        SettingsError: If a bound or the seed is not an integer, if the bounds are
            inverted, or if the log level is unknown.
    """
    defaults = AppSettings()
    low = _require_int(data, "low", defaults.low)
    high = _require_int(data, "high", defaults.high)
    seed = _require_int(data, "seed", defaults.seed)

    if low is None or high is None:
        raise SettingsError("Settings 'low' and 'high' cannot be null.")
    if low > high:
        raise SettingsError(f"Setting 'low' ({low}) must not be greater than 'high' ({high}).")

    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise SettingsError(f"Unknown log level '{log_level}'. Expected one of: {', '.join(LOG_LEVELS)}.")

    return AppSettings(
        low=low,
        high=high,
        seed=seed,
        window_title=str(data.get("window_title", defaults.window_title)),
        log_level=log_level,
    )


def default_settings_file():
    """Returns the packaged default settings file as an `importlib.resources` Traversable."""
    resource = resources.files(SETTINGS_PACKAGE)
    for part in SETTINGS_RESOURCE:
        resource = resource / part
    return resource


def load_settings(path: Optional[Path] = None) -> AppSettings:
    """
    Reads the settings file, falling back to defaults if it is missing or unreadable.

    Args:
        path: The settings file to read. Defaults to the packaged `config/settings.json`.

    Raises:
        SettingsError: If the file is valid JSON but holds unusable values.
    """
    settings_file = Path(path) if path is not None else default_settings_file()
    if not settings_file.is_file():
        logger.warning(f"Settings file not found at {settings_file}, using defaults.")
        return AppSettings()

    try:
        data = json.loads(settings_file.read_text(encoding='utf-8'))
    except (IOError, json.JSONDecodeError):
        logger.warning(f"Could not read {settings_file}, using defaults.")
        return AppSettings()

    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {settings_file} must contain a JSON object.")

    settings = settings_from_dict(data)
    logger.info(f"Loaded settings from {settings_file}: range [{settings.low}, {settings.high}]")
    return settings
