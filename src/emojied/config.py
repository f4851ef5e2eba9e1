# -*- coding: utf-8 -*-
"""
src/emojied/config.py

Module for handling application configuration.

This module defines default settings for Emojied, such as the fuzzy-match
threshold, the number of results shown and the export canvas size. It loads
user-defined settings from a configuration file (config.ini), creating one
with default values on the first run.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "Emojied"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_THRESHOLD = 0.3
DEFAULT_RESULT_CAP = 40
DEFAULT_NOTIFICATION_MS = 1500
DEFAULT_CANVAS_SIZE = 128
DEFAULT_FONT_SCALE = 0.8


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    - Windows: %APPDATA%/Emojied
    - macOS: ~/Library/Application Support/Emojied
    - Linux: ~/.config/Emojied

    Returns:
        Path: A Path object to the application's data directory.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux and other Unix-like
        app_dir = Path.home() / ".config" / APP_NAME

    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create application directory {app_dir}: {e}")
    return app_dir


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Args:
            config_path: Explicit location of the INI file. Defaults to
                         config.ini inside the application directory.
        """
        self.parser = configparser.ConfigParser()
        if config_path is None:
            self.app_dir = get_app_dir()
            self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME
        else:
            self.config_file_path = Path(config_path)
            self.app_dir = self.config_file_path.parent

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["Search"] = {
            "threshold": str(DEFAULT_THRESHOLD)
        }
        self.parser["Display"] = {
            "result_cap": str(DEFAULT_RESULT_CAP)
        }
        self.parser["Notification"] = {
            "duration_ms": str(DEFAULT_NOTIFICATION_MS)
        }
        self.parser["Export"] = {
            "canvas_size": str(DEFAULT_CANVAS_SIZE),
            "font_scale": str(DEFAULT_FONT_SCALE),
            "font_path": "",
            "export_dir": ""
        }
        self.parser["Dataset"] = {
            "path": ""
        }

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
            return
        try:
            self.parser.read(self.config_file_path, encoding="utf-8")
        except configparser.Error as e:
            logger.error(f"Config file {self.config_file_path} is malformed, using defaults: {e}")
            self._load_defaults()

    def _save_defaults(self):
        """Saves the current (default) configuration to the config file."""
        try:
            with open(self.config_file_path, 'w', encoding="utf-8") as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# You can edit these values. Restart the app for changes to take effect.\n\n")
                self.parser.write(configfile)
        except OSError as e:
            # Non-critical: the defaults stay in memory.
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    def _get_number(self, section: str, option: str, fallback, cast):
        getter = self.parser.getfloat if cast is float else self.parser.getint
        try:
            return getter(section, option, fallback=fallback)
        except ValueError:
            logger.warning(f"Invalid value for [{section}] {option}; using {fallback}.")
            return fallback

    def _get_path(self, section: str, option: str) -> Optional[Path]:
        value = self.parser.get(section, option, fallback="").strip()
        return Path(value).expanduser() if value else None

    # --- Properties to access settings easily and with correct types ---

    @property
    def threshold(self) -> float:
        """Maximum fuzzy-match distance (0 = exact only, 1 = anything)."""
        value = self._get_number("Search", "threshold", DEFAULT_THRESHOLD, float)
        if not 0.0 <= value <= 1.0:
            logger.warning(f"Threshold {value} out of range; using {DEFAULT_THRESHOLD}.")
            return DEFAULT_THRESHOLD
        return value

    @property
    def result_cap(self) -> int:
        """The number of matches displayed for a query."""
        value = self._get_number("Display", "result_cap", DEFAULT_RESULT_CAP, int)
        return value if value >= 0 else DEFAULT_RESULT_CAP

    @property
    def notification_ms(self) -> int:
        """How long the copied/saved notification stays visible."""
        value = self._get_number("Notification", "duration_ms", DEFAULT_NOTIFICATION_MS, int)
        return value if value > 0 else DEFAULT_NOTIFICATION_MS

    @property
    def canvas_size(self) -> int:
        """Edge length in pixels of exported PNG images."""
        value = self._get_number("Export", "canvas_size", DEFAULT_CANVAS_SIZE, int)
        return value if value > 0 else DEFAULT_CANVAS_SIZE

    @property
    def font_scale(self) -> float:
        """Glyph size as a fraction of the canvas edge."""
        value = self._get_number("Export", "font_scale", DEFAULT_FONT_SCALE, float)
        return value if 0.0 < value <= 1.0 else DEFAULT_FONT_SCALE

    @property
    def font_path(self) -> Optional[Path]:
        """A font to try before the system emoji fonts, if set."""
        return self._get_path("Export", "font_path")

    @property
    def export_dir(self) -> Optional[Path]:
        """Where exported PNGs are written; None means the Downloads folder."""
        return self._get_path("Export", "export_dir")

    @property
    def dataset_path(self) -> Optional[Path]:
        """A custom emoji JSON file; None means the bundled dataset."""
        return self._get_path("Dataset", "path")


# --- Singleton Instance ---
# Other modules can import this instance directly.
# e.g., from emojied.config import config
config = Config()


if __name__ == '__main__':
    print(f"--- {APP_NAME} Configuration ---")
    print(f"Application Data Directory: {config.app_dir}")
    print(f"Config file path: {config.config_file_path}")

    print("\n--- Loaded Settings ---")
    print(f"Threshold: {config.threshold}")
    print(f"Result cap: {config.result_cap}")
    print(f"Notification duration: {config.notification_ms} ms")
    print(f"Canvas: {config.canvas_size}px, font scale {config.font_scale}")
    print(f"Font path: {config.font_path}")
    print(f"Export dir: {config.export_dir}")
    print(f"Dataset path: {config.dataset_path}")
