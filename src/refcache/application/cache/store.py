"""Application cache – CacheStore port and in-memory implementation."""
from __future__ import annotations

import threading
from datetime import timedelta
from typing import Protocol, runtime_checkable

from refcache.kernel.time import Clock, SystemClock
from refcache.kernel.types import CacheOutcome, Fault, Miss, Ok

__all__ = ["CacheStore", "InMemoryCacheStore"]


@runtime_checkable
class CacheStore(Protocol):
    """Port: string key/value store with per-entry expiry.

    Implementations report failures as :class:`Fault` rather than raising.
    """

    def get(self, key: str) -> CacheOutcome[str]: ...
    def set(self, key: str, value: str, ttl: timedelta) -> Ok[None] | Fault: ...


class InMemoryCacheStore:
    """Thread-safe in-process CacheStore that honours TTLs against a :class:`Clock`."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._data: dict[str, tuple[str, float]] = {}  # key -> (value, expires_at)
        self._lock = threading.Lock()

    def get(self, key: str) -> CacheOutcome[str]:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return Miss()
            value, expires_at = entry
            if self._clock.timestamp() >= expires_at:
                del self._data[key]
                return Miss()
            return Ok(value)

    def set(self, key: str, value: str, ttl: timedelta) -> Ok[None] | Fault:
        seconds = ttl.total_seconds()
        if seconds <= 0:
            return Fault(f"non-positive ttl {seconds!r} for '{key}'")
        with self._lock:
            self._data[key] = (value, self._clock.timestamp() + seconds)
        return Ok(None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key).is_ok()

    def __len__(self) -> int:
        """Number of unexpired entries; expired ones are dropped on the way."""
        with self._lock:
            now = self._clock.timestamp()
            for key in [k for k, (_, expires_at) in self._data.items() if now >= expires_at]:
                del self._data[key]
            return len(self._data)

    def raw(self, key: str) -> str | None:
        """Stored text for *key* ignoring expiry (inspection helper for tests)."""
        with self._lock:
            entry = self._data.get(key)
        return entry[0] if entry is not None else None

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
