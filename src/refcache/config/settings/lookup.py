"""Config settings – LookupSettings for the region cache."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from refcache.config.settings.base import Settings
from refcache.config.validation import InvalidSettingValueError

SIXTY_DAYS_SECONDS = 60 * 24 * 60 * 60


@dataclasses.dataclass
class LookupSettings(Settings):
    """Settings read from ``REFCACHE_*`` environment variables."""

    _prefix: ClassVar[str] = "REFCACHE"

    redis_url: str = "redis://localhost:6379/0"
    ttl_seconds: int = SIXTY_DAYS_SECONDS
    key_prefix: str = "region:"
    socket_timeout: float = 0.5
    database_url: str = "sqlite://"
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.ttl_seconds <= 0:
            raise InvalidSettingValueError("ttl_seconds", self.ttl_seconds, "must be positive")
        if not self.key_prefix:
            raise InvalidSettingValueError("key_prefix", self.key_prefix, "must not be empty")
        if self.socket_timeout <= 0:
            raise InvalidSettingValueError("socket_timeout", self.socket_timeout, "must be positive")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["SIXTY_DAYS_SECONDS", "LookupSettings"]
