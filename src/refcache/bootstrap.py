"""Process wiring – settings, logging and the region lookup service."""
from __future__ import annotations

from typing import TYPE_CHECKING

from refcache.application.regions import RegionLookupService
from refcache.config.settings import EnvSettingsLoader, LookupSettings, SettingsLoader
from refcache.observability.logging import JsonLoggerFactory

if TYPE_CHECKING:
    from refcache.application.cache import CacheStore
    from refcache.application.regions import RegionSource
    from refcache.observability.metrics import Metrics


def bootstrap(
    settings: LookupSettings | None = None,
    *,
    loader: SettingsLoader | None = None,
    cache: "CacheStore | None" = None,
    source: "RegionSource | None" = None,
    metrics: "Metrics | None" = None,
) -> RegionLookupService:
    """Load settings, configure JSON logging at ``log_level`` and build the service.

    Usage::

        service = bootstrap()                     # REFCACHE_* from the environment
        service = bootstrap(loader=DotenvSettingsLoader(".env.local"))
    """
    if settings is None:
        settings = (loader or EnvSettingsLoader()).load(LookupSettings)
    JsonLoggerFactory.from_settings(settings)
    return RegionLookupService.from_settings(settings, source=source, cache=cache, metrics=metrics)


__all__ = ["bootstrap"]
