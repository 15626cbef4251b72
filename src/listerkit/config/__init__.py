"""Config – settings, loaders and validation errors."""

from listerkit.config.settings import EnvSettingsLoader, ListerSettings, Settings, SettingsLoader
from listerkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListerSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
