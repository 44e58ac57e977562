"""Config – 12-factor settings and loaders."""

from refcache.config.settings import EnvSettingsLoader, LookupSettings, Settings, SettingsLoader
from refcache.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LookupSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
