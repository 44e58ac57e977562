"""Application cache – RecordCodec port and JSON implementation.

The encoded form outlives the process (entries persist for the whole TTL), so
the JSON layout produced here must stay stable across releases.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from refcache.kernel.errors import SerializationError

__all__ = ["JsonRecordCodec", "RecordCodec"]

T = TypeVar("T")


def _identity(value: Any) -> Any:
    return value


@runtime_checkable
class RecordCodec(Protocol[T]):
    """Port: textual encoding of a record collection.

    Implementations must satisfy ``decode(encode(s)) == list(s)`` and raise
    :class:`SerializationError` for anything they cannot handle.
    """

    def encode(self, records: Sequence[T]) -> str: ...
    def decode(self, text: str) -> list[T]: ...


class JsonRecordCodec(Generic[T]):
    """Encode a collection as a compact JSON array.

    ``to_record`` / ``from_record`` convert between a record and its JSON
    object form; both default to the identity so plain ``dict`` records work
    unchanged.
    """

    def __init__(
        self,
        to_record: Callable[[T], Any] = _identity,
        from_record: Callable[[Any], T] = _identity,
        *,
        payload_type: str | None = None,
    ) -> None:
        self._to_record = to_record
        self._from_record = from_record
        self._payload_type = payload_type

    def encode(self, records: Sequence[T]) -> str:
        try:
            return json.dumps(
                [self._to_record(r) for r in records],
                ensure_ascii=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError, AttributeError, OverflowError, RecursionError) as exc:
            raise SerializationError(
                f"Could not encode collection: {exc}",
                payload_type=self._payload_type,
                cause=exc,
            ) from exc

    def decode(self, text: str | bytes) -> list[T]:
        try:
            payload = json.loads(text)
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(
                f"Cached value is not valid JSON: {exc}",
                payload_type=self._payload_type,
                cause=exc,
            ) from exc
        if not isinstance(payload, list):
            raise SerializationError(
                f"Cached value is a JSON {type(payload).__name__}, expected an array",
                payload_type=self._payload_type,
            )
        try:
            return [self._from_record(item) for item in payload]
        except (TypeError, ValueError, KeyError, AttributeError, OverflowError, RecursionError) as exc:
            raise SerializationError(
                f"Cached element does not match the record shape: {exc}",
                payload_type=self._payload_type,
                cause=exc,
            ) from exc
