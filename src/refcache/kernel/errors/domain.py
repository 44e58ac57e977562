"""Domain errors — invalid requests and absent reference data."""

from __future__ import annotations

from typing import Any

from refcache.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a lookup request breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet validation rules.

    ``errors`` is a list of field-level failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """The requested reference data does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = ["DomainError", "NotFoundError", "ValidationError"]
