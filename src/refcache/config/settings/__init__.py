"""Config settings – 12-factor env-based configuration."""
from refcache.config.settings.base import Settings
from refcache.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from refcache.config.settings.lookup import SIXTY_DAYS_SECONDS, LookupSettings

__all__ = [
    "SIXTY_DAYS_SECONDS",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "LookupSettings",
    "Settings",
    "SettingsLoader",
]
