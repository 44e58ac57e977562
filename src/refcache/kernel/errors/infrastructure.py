"""Infrastructure errors — cache store, authoritative source and codec failures."""

from __future__ import annotations

from typing import Any

from refcache.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a domain rule violation."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to reach an external resource (database, cache, …)."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class SerializationError(InfrastructureError):
    """A cached collection could not be encoded or decoded."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class CacheStoreError(InfrastructureError):
    """The cache store rejected or failed an operation."""

    default_code = "cache_store_error"


class SourceUnavailableError(InfrastructureError):
    """The authoritative source failed to produce a result.

    This is the only error a cache-aside lookup surfaces to its caller;
    HTTP layers typically map it to ``503 Service Unavailable``.
    """

    default_code = "source_unavailable"

    def __init__(
        self,
        key: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Authoritative source failed for '{key}'", **kwargs)
        self.key = key


__all__ = [
    "CacheStoreError",
    "ConnectionError",
    "InfrastructureError",
    "SerializationError",
    "SourceUnavailableError",
]
