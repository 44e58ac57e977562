"""Application regions – RegionLookupService."""
from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

from refcache.application.cache import CacheKey, CacheStore, JsonRecordCodec
from refcache.application.regions.region import Region
from refcache.application.regions.source import RegionSource
from refcache.kernel.errors import NotFoundError
from refcache.resilience.cache import CacheAsideLookup

if TYPE_CHECKING:
    from refcache.config.settings import LookupSettings
    from refcache.observability.metrics import Metrics

__all__ = ["DEFAULT_KEY_PREFIX", "RegionLookupService", "region_codec"]

DEFAULT_KEY_PREFIX = "region:"


def region_codec() -> JsonRecordCodec[Region]:
    return JsonRecordCodec(Region.to_dict, Region.from_dict, payload_type="Region")


class RegionLookupService:
    """Child-region lookups served through a :class:`CacheAsideLookup`.

    Usage::

        service = RegionLookupService(lookup, source)
        districts = service.children_of(42)   # [] when the parent has none
        service.require_children_of(42)       # raises NotFoundError instead
    """

    def __init__(
        self,
        lookup: CacheAsideLookup[Region],
        source: RegionSource,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self._lookup = lookup
        self._source = source
        self._key_prefix = key_prefix

    @classmethod
    def from_settings(
        cls,
        settings: "LookupSettings",
        source: RegionSource | None = None,
        cache: CacheStore | None = None,
        metrics: "Metrics | None" = None,
    ) -> "RegionLookupService":
        """Wire a service from settings.

        Reads regions from ``settings.database_url`` unless *source* is given and
        connects to Redis unless *cache* is given.
        """
        if source is None:
            from refcache.adapters.sqlalchemy import SqlAlchemyRegionSource, SqlAlchemySessionFactory

            source = SqlAlchemyRegionSource(SqlAlchemySessionFactory.from_settings(settings))
        if cache is None:
            from refcache.adapters.redis import RedisCacheStore

            cache = RedisCacheStore.from_settings(settings)
        lookup = CacheAsideLookup(
            cache,
            region_codec(),
            ttl=timedelta(seconds=settings.ttl_seconds),
            metrics=metrics,
        )
        return cls(lookup, source, key_prefix=settings.key_prefix)

    def key_for(self, parent_id: int) -> str:
        return CacheKey.for_children(self._key_prefix, parent_id)

    def children_of(self, parent_id: int) -> list[Region]:
        return self._lookup.fetch(
            self.key_for(parent_id),
            lambda: self._source.children_of(parent_id),
        )

    def require_children_of(self, parent_id: int) -> list[Region]:
        regions = self.children_of(parent_id)
        if not regions:
            raise NotFoundError("Region children", parent_id)
        return regions
