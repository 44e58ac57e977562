"""Testing fakes – RecordingSource."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class RecordingSource(Generic[T]):
    """Zero-argument producer that counts calls and can be told to fail.

    Usage::

        source = RecordingSource([{"id": 1, "name": "Gangnam"}])
        lookup.fetch("region:42", source)
        assert source.calls == 1
    """

    def __init__(self, result: Sequence[T] | None = (), error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls = 0

    def __call__(self) -> Sequence[T] | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result

    def fail_with(self, error: Exception) -> None:
        self.error = error


__all__ = ["RecordingSource"]
