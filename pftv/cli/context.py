"""
CLI Context - Global application context and state management.

This module holds the configuration manager and the effective settings
for the current invocation so commands can build clients without
circular imports.
"""

from typing import Optional

from pftv.core import AppSettings, ConfigManager, PFTVClient


# Global application state
_config_manager: Optional[ConfigManager] = None
_settings: Optional[AppSettings] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        raise RuntimeError("Configuration manager not initialized")
    return _config_manager


def set_config_manager(config_manager: ConfigManager) -> None:
    """Set the global configuration manager instance."""
    global _config_manager, _settings
    _config_manager = config_manager
    _settings = None


def get_settings() -> AppSettings:
    """Settings for this invocation: the saved settings plus command-line overrides."""
    if _settings is not None:
        return _settings
    return get_config_manager().settings


def set_settings(settings: Optional[AppSettings]) -> None:
    """Override the saved settings for this invocation."""
    global _settings
    _settings = settings


def create_client() -> PFTVClient:
    """Create a client from the effective settings."""
    return PFTVClient(get_settings())


# Export context functions
__all__ = [
    "get_config_manager",
    "set_config_manager",
    "get_settings",
    "set_settings",
    "create_client",
]
