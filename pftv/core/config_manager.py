"""
Configuration Manager - JSON-based settings management.

This module loads, validates and persists PFTV's settings file, falling
back to defaults (and keeping a backup) when the file on disk is corrupt.
"""

import json
import logging
from pathlib import Path
from threading import Lock
from typing import Any, Optional, Union

from pydantic import ValidationError

from pftv.core.config_schemas import AppSettings
from pftv.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_DIR = Path.home() / ".config" / "pftv"


class ConfigManager:
    """
    Manages application configuration with JSON persistence and validation.

    Provides thread-safe access to the settings with validation on every
    update and atomic writes to ``settings.json``.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory containing settings.json.
                       Defaults to ~/.config/pftv if not specified.
        """
        self.config_dir = Path(config_dir or DEFAULT_CONFIG_DIR)
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot create configuration directory: {e}",
                config_path=str(self.config_dir)
            )

        self._settings_file = self.config_dir / "settings.json"

        self._lock = Lock()
        self._settings: AppSettings = self._load_settings()

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _load_settings(self) -> AppSettings:
        """Load and validate application settings."""
        if not self._settings_file.exists():
            logger.info("Settings file not found, creating default configuration")
            settings = AppSettings()
            self._save_settings(settings)
            return settings

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            settings = AppSettings.model_validate(data)
            logger.debug(f"Configuration loaded from {self._settings_file}")
            return settings
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Invalid settings file, using defaults: {e}")
            # Backup corrupted file
            backup_path = self._settings_file.with_suffix('.json.backup')
            self._settings_file.replace(backup_path)
            logger.info(f"Corrupted settings backed up to {backup_path}")

            settings = AppSettings()
            self._save_settings(settings)
            return settings

    def _save_settings(self, settings: AppSettings) -> None:
        """Save settings to file with atomic write."""
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings.model_dump(), f, indent=2, ensure_ascii=False)
            temp_file.replace(self._settings_file)
            logger.debug("Settings saved successfully")
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise ConfigurationError(
                f"Failed to save settings: {e}",
                config_path=str(self._settings_file)
            )

    @property
    def settings(self) -> AppSettings:
        """Get current application settings (thread-safe)."""
        with self._lock:
            return self._settings

    def update_setting(self, key_path: str, value: Any) -> None:
        """
        Update a specific setting using dot notation.

        Args:
            key_path: Dot-separated path to the setting (e.g., 'network.timeout')
            value: New value for the setting; strings are coerced by validation

        Raises:
            ConfigurationError: If key path is invalid or value is invalid
        """
        with self._lock:
            settings_dict = self._settings.model_dump()

            keys = key_path.split('.')
            current = settings_dict

            for key in keys[:-1]:
                if not isinstance(current.get(key), dict):
                    raise ConfigurationError(f"Invalid setting path: {key_path}")
                current = current[key]

            final_key = keys[-1]
            if final_key not in current or isinstance(current[final_key], dict):
                raise ConfigurationError(f"Invalid setting key: {key_path}")

            current[final_key] = value

            try:
                updated_settings = AppSettings.model_validate(settings_dict)
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid setting value for {key_path}: {e.errors()[0]['msg']}",
                    config_path=str(self._settings_file),
                    details=str(e)
                )

            self._save_settings(updated_settings)
            self._settings = updated_settings
            logger.info(f"Setting updated: {key_path} = {value}")

    def get_setting(self, key_path: str, default: Any = None) -> Any:
        """
        Get a specific setting using dot notation.

        Args:
            key_path: Dot-separated path to the setting
            default: Default value if setting not found

        Returns:
            The setting value or default
        """
        with self._lock:
            current: Any = self._settings.model_dump()

            try:
                for key in key_path.split('.'):
                    current = current[key]
                return current
            except (KeyError, TypeError):
                return default

    def reset_to_defaults(self) -> None:
        """Reset all configuration to default values."""
        with self._lock:
            logger.warning("Resetting configuration to defaults")
            self._settings = AppSettings()
            self._save_settings(self._settings)


# Export manager
__all__ = ["ConfigManager", "DEFAULT_CONFIG_DIR"]
