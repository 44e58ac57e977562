"""Kernel – framework-agnostic building blocks (errors, outcomes, time)."""

from refcache.kernel.errors import (
    ApplicationError,
    BaseError,
    CacheStoreError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    SerializationError,
    SourceUnavailableError,
    ValidationError,
)
from refcache.kernel.types import CacheOutcome, Fault, Miss, Ok

__all__ = [
    "ApplicationError",
    "BaseError",
    "CacheOutcome",
    "CacheStoreError",
    "DomainError",
    "Fault",
    "InfrastructureError",
    "Miss",
    "NotFoundError",
    "Ok",
    "SerializationError",
    "SourceUnavailableError",
    "ValidationError",
]
