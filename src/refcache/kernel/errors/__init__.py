"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── SerializationError
        ├── CacheStoreError
        └── SourceUnavailableError
"""

from refcache.kernel.errors.application import ApplicationError
from refcache.kernel.errors.base import BaseError
from refcache.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from refcache.kernel.errors.infrastructure import (
    CacheStoreError,
    ConnectionError,
    InfrastructureError,
    SerializationError,
    SourceUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CacheStoreError",
    "ConnectionError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "SerializationError",
    "SourceUnavailableError",
    "ValidationError",
]
