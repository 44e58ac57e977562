"""Application regions – region records, sources and lookup service."""
from refcache.application.regions.region import Region
from refcache.application.regions.service import DEFAULT_KEY_PREFIX, RegionLookupService, region_codec
from refcache.application.regions.source import InMemoryRegionSource, RegionSource

__all__ = [
    "DEFAULT_KEY_PREFIX",
    "InMemoryRegionSource",
    "Region",
    "RegionLookupService",
    "RegionSource",
    "region_codec",
]
