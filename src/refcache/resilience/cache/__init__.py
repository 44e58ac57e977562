"""Resilience – read-through cache-aside lookup."""
from refcache.resilience.cache.aside import DEFAULT_TTL, CacheAsideLookup

__all__ = ["DEFAULT_TTL", "CacheAsideLookup"]
