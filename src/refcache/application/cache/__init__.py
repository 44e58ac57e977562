"""Application cache – keys, codec and store port."""
from refcache.application.cache.codec import JsonRecordCodec, RecordCodec
from refcache.application.cache.keys import CacheKey
from refcache.application.cache.store import CacheStore, InMemoryCacheStore

__all__ = [
    "CacheKey",
    "CacheStore",
    "InMemoryCacheStore",
    "JsonRecordCodec",
    "RecordCodec",
]
