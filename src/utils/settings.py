"""
Settings management for the region registry

Handles persistent settings (currently the logging setup). Values are
stored as JSON and merged over DEFAULT_SETTINGS on load.
"""

import json
import os
from src.utils.message import Log
from src.utils.paths import get_settings_path

# Default settings
DEFAULT_SETTINGS = {
    # Logging settings
    "log_level": "INFO",
    "console_logging": True,
    "file_logging": False,
    "log_folder": None,  # None -> platform logs directory
    "log_keep": 10,  # Number of log files kept when purging
}


class Settings:
    """Settings manager backed by a JSON file"""

    def __init__(self, settings_file: str = None):
        self.settings_file = str(settings_file) if settings_file else str(get_settings_path())
        self.settings = DEFAULT_SETTINGS.copy()
        self.load_settings()

    def load_settings(self):
        """Load settings from file. A missing file leaves the defaults in place."""
        if not os.path.exists(self.settings_file):
            Log.debug(f"Settings: No settings file at {self.settings_file}, using defaults")
            return
        try:
            with open(self.settings_file, 'r', encoding='utf-8') as file:
                saved_settings = json.load(file)
        except (OSError, ValueError) as e:
            Log.error(f"Settings: Failed to load {self.settings_file}: {e}")
            self.settings = DEFAULT_SETTINGS.copy()
            return

        if not isinstance(saved_settings, dict):
            Log.error(f"Settings: Expected a JSON object in {self.settings_file}, using defaults")
            self.settings = DEFAULT_SETTINGS.copy()
            return

        self.settings.update(saved_settings)
        Log.debug(f"Settings: Loaded {self.settings_file}")

    def save_settings(self):
        """Save settings to file"""
        os.makedirs(os.path.dirname(os.path.abspath(self.settings_file)), exist_ok=True)
        with open(self.settings_file, 'w', encoding='utf-8') as file:
            json.dump(self.settings, file, indent=4)
        Log.debug(f"Settings: Saved {self.settings_file}")

    def get(self, key, default=None):
        """Get a setting value"""
        return self.settings.get(key, default)

    def set(self, key, value):
        """Set a setting value and persist it"""
        self.settings[key] = value
        self.save_settings()


def apply_logging_settings(settings: Settings = None) -> None:
    """
    Push the logging section of the settings into Log.

    Args:
        settings: Settings instance (defaults to the shared instance)
    """
    settings = settings or get_settings()

    Log.set_level(settings.get("log_level", "INFO"))
    Log.set_console_logging(bool(settings.get("console_logging", True)))
    if settings.get("file_logging", False):
        Log.enable_file_logging(settings.get("log_folder"), keep=int(settings.get("log_keep", 10)))
    else:
        Log.disable_file_logging()


_settings: Settings = None  # Lazily created


def get_settings() -> Settings:
    """Get or create the shared Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
