# zfinder/core/settings.py

import json
import logging
import shlex
import shutil
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, List

logger = logging.getLogger(__name__)

# The settings file lives next to the package, in <project root>/config.
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / 'config' / 'settings.json'


# --- Value Checks ---
# Each check returns the cleaned value or raises ValueError/TypeError.

def _open_command(value: Any) -> List[str] | None:
    if value is None:
        return None
    # A single string is split the way a shell would: "open -R" -> ['open', '-R'].
    if isinstance(value, str):
        return shlex.split(value) or None
    if isinstance(value, list) and all(isinstance(part, str) for part in value):
        return list(value) or None
    raise TypeError("expected a string or a list of strings")


def _text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise TypeError("expected a non-empty string")
    return value


def _positive_int(value: Any) -> int:
    # bool is a subclass of int, but `true` is never a sensible size.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("expected an integer")
    if value <= 0:
        raise ValueError("expected a value greater than zero")
    return value


def _non_negative_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("expected a number")
    if value < 0:
        raise ValueError("expected a value of zero or more")
    return float(value)


_CHECKS = {
    "open_command": _open_command,
    "log_level": _text,
    "log_file": _text,
    "window_width": _positive_int,
    "window_height": _positive_int,
    "shake_amount": _non_negative_number,
    "shakes_per_unit": _positive_int,
}


@dataclass
class AppSettings:
    """User-tunable application settings, stored as a flat JSON object."""
    # Command prefix used to open a path; None means the platform default.
    open_command: List[str] | None = None
    log_level: str = "DEBUG"
    log_file: str = "zfinder.log"
    window_width: int = 520
    window_height: int = 600
    shake_amount: float = 5.0
    shakes_per_unit: int = 5

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """
        Builds settings from a dict.

        Unknown keys are ignored. A value of the wrong type or out of range is
        replaced by that setting's default, with a warning, so one bad entry
        never costs the rest of the file.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if key not in known:
                continue
            try:
                values[key] = _CHECKS[key](value)
            except (TypeError, ValueError) as e:
                logger.warning(f"Invalid value {value!r} for setting '{key}' ({e}). Using the default.")
        return cls(**values)


def load_settings(settings_path: Path | None = None) -> AppSettings:
    """
    Reads settings from disk.

    A missing file gives the defaults. An unreadable or malformed file is
    logged and also gives the defaults, so the application can always start.
    """
    settings_path = settings_path or DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        logger.info(f"No settings file at '{settings_path}'. Using defaults.")
        return AppSettings()
    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings file must contain a JSON object")
        settings = AppSettings.from_dict(data)
        logger.info(f"Loaded settings from '{settings_path}'.")
        return settings
    except (IOError, ValueError, TypeError) as e:
        logger.warning(f"Could not read settings from '{settings_path}', using defaults: {e}")
        return AppSettings()


def save_settings(settings: AppSettings, settings_path: Path | None = None) -> bool:
    """
    Writes settings to disk, backing up the previous file first.

    If the write fails the backup is restored.

    Returns:
        True on success, False otherwise.
    """
    settings_path = settings_path or DEFAULT_SETTINGS_PATH
    backup_path = settings_path.with_suffix(".json.bak")
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        if settings_path.exists():
            shutil.copy(settings_path, backup_path)
            logger.debug(f"Settings backup created at: {backup_path}")

        with open(settings_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(settings), f, indent=2)
        logger.info(f"Settings saved to '{settings_path}'.")
        return True
    except (IOError, TypeError) as e:
        logger.error(f"Failed to save settings: {e}", exc_info=True)
        if backup_path.exists():
            shutil.copy(backup_path, settings_path)
            logger.warning("Restored settings from backup after a failed save.")
        return False
