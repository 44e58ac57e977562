"""
refcache – read-through cache-aside lookup for hierarchical reference data.

Import path convention::

    from refcache.resilience.cache import CacheAsideLookup
    from refcache.application.cache import InMemoryCacheStore, JsonRecordCodec
    from refcache.application.regions import RegionLookupService
    from refcache.adapters.redis import RedisCacheStore
    from refcache.bootstrap import bootstrap
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
