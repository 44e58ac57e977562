"""CacheOutcome[T] — Ok, Miss and Fault variants returned by cache stores.

Cache stores report what happened instead of raising, so callers can handle
every case with a ``match`` statement::

    match store.get(key):
        case Ok(value=raw):
            ...
        case Miss():
            ...
        case Fault(reason=reason):
            ...
"""

from __future__ import annotations

from typing import Any, Callable, Generic, NoReturn, TypeVar

from refcache.kernel.errors import CacheStoreError

T = TypeVar("T")
U = TypeVar("U")


class Ok(Generic[T]):
    """The store answered with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_miss(self) -> bool:
        return False

    def is_fault(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Miss:
    """The store holds nothing (or nothing unexpired) under the key."""

    __slots__ = ()
    __match_args__ = ()

    def is_ok(self) -> bool:
        return False

    def is_miss(self) -> bool:
        return True

    def is_fault(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise KeyError("Called unwrap() on Miss")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Miss":  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Miss)

    def __hash__(self) -> int:
        return hash("miss")

    def __repr__(self) -> str:
        return "Miss()"


class Fault:
    """The store could not be consulted (unreachable, timed out, rejected)."""

    __slots__ = ("_reason", "_cause")
    __match_args__ = ("reason", "cause")

    def __init__(self, reason: str, cause: BaseException | None = None) -> None:
        self._reason = reason
        self._cause = cause

    @property
    def reason(self) -> str:
        return self._reason

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def is_ok(self) -> bool:
        return False

    def is_miss(self) -> bool:
        return False

    def is_fault(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise CacheStoreError(self._reason, cause=self._cause)

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[Any], Any]) -> "Fault":  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Fault) and other._reason == self._reason

    def __hash__(self) -> int:
        return hash(("fault", self._reason))

    def __repr__(self) -> str:
        return f"Fault({self._reason!r})"


type CacheOutcome[T] = Ok[T] | Miss | Fault

__all__ = ["CacheOutcome", "Fault", "Miss", "Ok"]
