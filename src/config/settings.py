"""
Settings management for NBA Players Browser.
Handles loading, saving, and managing application settings.
"""

import json
import os
import traceback
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from constants import (
    CONFIG_FILE,
    API_BASE_URL,
    DEFAULT_PAGE_SIZE,
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


@dataclass
class Settings:
    """Application settings with default values."""

    api_base_url: str = API_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: Optional[float] = None  # None = transport default
    keep_position_filter: bool = False  # Keep the filter across page loads
    fullscreen: bool = False
    window_width: int = SCREEN_WIDTH
    window_height: int = SCREEN_HEIGHT

    def __post_init__(self):
        """Normalize values read from a hand-edited config file."""
        self.api_base_url = (self.api_base_url or API_BASE_URL).rstrip("/")
        self.page_size = max(1, int(self.page_size))
        if self.request_timeout is not None:
            self.request_timeout = float(self.request_timeout)
        self.keep_position_filter = _to_bool(self.keep_position_filter)
        self.fullscreen = _to_bool(self.fullscreen)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


def get_default_settings() -> Dict[str, Any]:
    """Get default settings as a dictionary."""
    return Settings().to_dict()


def load_settings(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load settings from config file.

    Args:
        config_file: Path of the JSON config file

    Returns:
        Dictionary of settings with defaults for missing values
    """
    default_settings = get_default_settings()

    try:
        if os.path.exists(config_file):
            with open(config_file, "r") as f:
                loaded_settings = json.load(f)
            if isinstance(loaded_settings, dict):
                # Merge with defaults to handle new settings
                default_settings.update(loaded_settings)
        else:
            # Create config file with defaults
            save_settings(default_settings, config_file)
    except (OSError, ValueError) as e:
        from utils.logging import log_error

        log_error(
            "Failed to load settings, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )

    return default_settings


def save_settings(settings_to_save: Dict[str, Any], config_file: str = CONFIG_FILE) -> bool:
    """
    Save settings to config file.

    Args:
        settings_to_save: Dictionary of settings to save
        config_file: Path of the JSON config file

    Returns:
        True if successful, False otherwise
    """
    try:
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_file, "w") as f:
            json.dump(settings_to_save, f, indent=2)
        return True
    except (OSError, TypeError) as e:
        from utils.logging import log_error

        log_error("Failed to save settings", type(e).__name__, traceback.format_exc())
        return False
