"""Testing fakes – in-memory doubles for the cache store, source, metrics and clock."""
from refcache.kernel.time import FrozenClock
from refcache.testing.fakes.cache import FailingCacheStore, RaisingCacheStore, RecordingCacheStore
from refcache.testing.fakes.clock import FakeClock
from refcache.testing.fakes.metrics import FakeMetricsRegistry
from refcache.testing.fakes.source import RecordingSource

__all__ = [
    "FailingCacheStore",
    "FakeClock",
    "FakeMetricsRegistry",
    "FrozenClock",
    "RaisingCacheStore",
    "RecordingCacheStore",
    "RecordingSource",
]
