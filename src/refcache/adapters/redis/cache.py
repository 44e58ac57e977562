"""Redis adapter – RedisCacheStore."""
from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

from refcache.kernel.types import CacheOutcome, Fault, Miss, Ok

if TYPE_CHECKING:
    from refcache.config.settings import LookupSettings


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'refcache[redis]' to use the Redis adapter") from exc


class RedisCacheStore:
    """CacheStore over a synchronous Redis client.

    Values are stored as UTF-8 strings with ``SET key value EX ttl``. Every
    ``redis.RedisError`` (connection refused, timeout, READONLY replica, …)
    is reported as :class:`Fault`; nothing is raised.
    """

    def __init__(self, url: str | None = None, *, client: Any = None, **kwargs: Any) -> None:
        self._redis = _require_redis()
        if client is None:
            if url is None:
                raise ValueError("RedisCacheStore needs either a url or a client")
            kwargs.setdefault("decode_responses", True)
            client = self._redis.Redis.from_url(url, **kwargs)
        self._client = client

    @classmethod
    def from_settings(cls, settings: "LookupSettings") -> "RedisCacheStore":
        return cls(
            settings.redis_url,
            socket_timeout=settings.socket_timeout,
            socket_connect_timeout=settings.socket_timeout,
        )

    def get(self, key: str) -> CacheOutcome[str]:
        try:
            raw = self._client.get(key)
        except self._redis.RedisError as exc:
            return Fault(f"redis GET failed: {exc}", exc)
        if raw is None:
            return Miss()
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                return Fault(f"stored value for '{key}' is not UTF-8", exc)
        return Ok(raw)

    def set(self, key: str, value: str, ttl: timedelta) -> Ok[None] | Fault:
        seconds = int(ttl.total_seconds())
        if seconds <= 0:
            return Fault(f"non-positive ttl {ttl!r} for '{key}'")
        try:
            self._client.set(key, value, ex=seconds)
        except self._redis.RedisError as exc:
            return Fault(f"redis SET failed: {exc}", exc)
        return Ok(None)

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisCacheStore"]
