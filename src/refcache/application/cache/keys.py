"""Application cache – CacheKey builder."""
from __future__ import annotations

from refcache.kernel.errors import ValidationError

__all__ = ["CacheKey"]


class CacheKey:
    """Factory for cache key strings."""

    @staticmethod
    def for_children(prefix: str, parent_id: str | int) -> str:
        """Key for the collection of children under *parent_id*, e.g. ``region:42``."""
        key = f"{prefix}{parent_id}"
        if not key:
            raise ValidationError("Cache key must not be empty")
        return key
