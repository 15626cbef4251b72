"""Config settings – environment-based configuration."""
from listerkit.config.settings.base import Settings
from listerkit.config.settings.lister import ListerSettings
from listerkit.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ListerSettings", "Settings", "SettingsLoader"]
