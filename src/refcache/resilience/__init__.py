"""Resilience – fail-open caching in front of an authoritative source."""
from refcache.resilience.cache import DEFAULT_TTL, CacheAsideLookup

__all__ = ["DEFAULT_TTL", "CacheAsideLookup"]
