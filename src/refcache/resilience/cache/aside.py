from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Generic, Sequence, TypeVar

from refcache.application.cache.codec import JsonRecordCodec, RecordCodec
from refcache.application.cache.store import CacheStore
from refcache.kernel.errors import SerializationError, SourceUnavailableError, ValidationError
from refcache.kernel.types import CacheOutcome, Fault, Miss, Ok
from refcache.observability.logging import get_logger
from refcache.observability.metrics import Metrics, NoopMetrics

__all__ = [
    "DEFAULT_TTL",
    "CacheAsideLookup",
]

T = TypeVar("T")

DEFAULT_TTL = timedelta(days=60)

logger = get_logger(__name__)


def _reason(exc: Exception) -> str:
    if isinstance(exc, SerializationError):
        return exc.message
    return f"{type(exc).__name__}: {exc}"


class CacheAsideLookup(Generic[T]):
    """Read-through cache-aside lookup that fails open on the cache.

    ``fetch`` consults the cache, falls back to the producer on a miss or on
    any cache fault, and writes non-empty producer results back with a fixed
    TTL. Cache faults are logged and counted, never raised; the only error a
    caller sees is :class:`SourceUnavailableError` when the producer fails.

    Concurrent misses on the same key each call the producer and each write
    the result (last write wins).
    """

    def __init__(
        self,
        cache: CacheStore,
        codec: RecordCodec[T] | None = None,
        ttl: timedelta = DEFAULT_TTL,
        metrics: Metrics | None = None,
    ) -> None:
        if ttl.total_seconds() <= 0:
            raise ValidationError(f"ttl must be positive, got {ttl!r}")
        self._cache = cache
        self._codec: RecordCodec[T] = codec if codec is not None else JsonRecordCodec()
        self._ttl = ttl
        metrics = metrics or NoopMetrics()
        self._lookups = metrics.counter("refcache_lookup_total", "Cache-aside lookups by outcome")
        self._writes = metrics.counter("refcache_cache_write_total", "Cache fill attempts by result")
        self._source_duration = metrics.histogram(
            "refcache_source_duration_ms", "Authoritative source call latency"
        )

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def fetch(self, key: str, produce: Callable[[], Sequence[T] | None]) -> list[T]:
        if not key:
            raise ValidationError("Cache key must not be empty")

        cached = self._read(key)
        if cached is not None:
            self._lookups.add(1, {"outcome": "hit"})
            return cached

        records = self._produce(key, produce)
        self._fill(key, records)
        return records

    # ------------------------------------------------------------------
    # stages
    # ------------------------------------------------------------------

    def _read(self, key: str) -> list[T] | None:
        """Stage 1: decoded cached collection, or ``None`` when unusable."""
        match self._safe_get(key):
            case Ok(value=raw):
                try:
                    records = self._codec.decode(raw)
                except Exception as exc:  # noqa: BLE001
                    logger.warning("cache_decode_fault", key=key, reason=_reason(exc))
                    self._lookups.add(1, {"outcome": "fault"})
                    return None
                logger.debug("cache_hit", key=key, size=len(records))
                return records
            case Miss():
                logger.debug("cache_miss", key=key)
                self._lookups.add(1, {"outcome": "miss"})
                return None
            case Fault(reason=reason):
                logger.warning("cache_read_fault", key=key, reason=reason)
                self._lookups.add(1, {"outcome": "fault"})
                return None
            case other:
                logger.warning("cache_read_fault", key=key, reason=f"unexpected outcome {other!r}")
                self._lookups.add(1, {"outcome": "fault"})
                return None

    def _produce(self, key: str, produce: Callable[[], Sequence[T] | None]) -> list[T]:
        """Stage 2: call the authoritative source exactly once."""
        started = time.perf_counter()
        try:
            result = produce()
        except SourceUnavailableError:
            logger.error("source_failed", key=key, exc_info=True)
            self._lookups.add(1, {"outcome": "source_error"})
            raise
        except Exception as exc:
            logger.error("source_failed", key=key, exc_info=True)
            self._lookups.add(1, {"outcome": "source_error"})
            raise SourceUnavailableError(key, cause=exc) from exc
        finally:
            self._source_duration.record((time.perf_counter() - started) * 1000.0)
        return list(result) if result is not None else []

    def _fill(self, key: str, records: list[T]) -> None:
        """Stage 3: best-effort write-back; never affects the returned value."""
        if not records:
            # "not found" is never cached
            logger.debug("cache_fill_skipped_empty", key=key)
            self._writes.add(1, {"result": "skipped"})
            return
        try:
            text = self._codec.encode(records)
        except Exception as exc:  # noqa: BLE001
            logger.warning("cache_write_fault", key=key, reason=_reason(exc))
            self._writes.add(1, {"result": "fault"})
            return
        match self._safe_set(key, text):
            case Ok():
                logger.debug("cache_filled", key=key, size=len(records))
                self._writes.add(1, {"result": "ok"})
            case Fault(reason=reason):
                logger.warning("cache_write_fault", key=key, reason=reason)
                self._writes.add(1, {"result": "fault"})
            case other:
                logger.warning("cache_write_fault", key=key, reason=f"unexpected outcome {other!r}")
                self._writes.add(1, {"result": "fault"})

    # ------------------------------------------------------------------
    # store access; a store that raises is treated as faulting
    # ------------------------------------------------------------------

    def _safe_get(self, key: str) -> CacheOutcome[str]:
        try:
            return self._cache.get(key)
        except Exception as exc:  # noqa: BLE001
            return Fault(f"{type(exc).__name__}: {exc}", exc)

    def _safe_set(self, key: str, text: str) -> Ok[None] | Fault:
        try:
            return self._cache.set(key, text, self._ttl)
        except Exception as exc:  # noqa: BLE001
            return Fault(f"{type(exc).__name__}: {exc}", exc)
