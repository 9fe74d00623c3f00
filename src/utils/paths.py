"""
Path management for the region registry

Handles platform-specific user directories following standard conventions:
- macOS: ~/Library/Application Support/Regions/
- Linux: ~/.local/share/regions/ (data), ~/.config/regions/ (config)
- Windows: %APPDATA%/Regions/
"""
import os
import sys
from pathlib import Path


APP_NAME = "Regions"
SETTINGS_FILE_ENV = "REGIONS_SETTINGS_FILE"


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.

    Returns:
        Path to user data directory (created if needed).
    """
    system = sys.platform

    if system == "darwin":
        base = Path.home() / "Library" / "Application Support"
        user_data_dir = base / APP_NAME
    elif system == "win32":
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        user_data_dir = base / APP_NAME
    else:
        user_data_dir = Path.home() / ".local" / "share" / APP_NAME.lower()

    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Same as the data directory on macOS/Windows, ~/.config/regions/ on Linux.
    """
    if sys.platform in ("darwin", "win32"):
        return get_user_data_dir()

    config_dir = Path.home() / ".config" / APP_NAME.lower()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """
    Get directory for log files (inside the user data directory).
    """
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """
    Get path to the settings file.

    The REGIONS_SETTINGS_FILE environment variable wins over the
    platform default (settings.json in the user config directory).
    """
    override = os.getenv(SETTINGS_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return get_user_config_dir() / "settings.json"
