"""Redis adapter – cache store."""
from refcache.adapters.redis.cache import RedisCacheStore

__all__ = ["RedisCacheStore"]
