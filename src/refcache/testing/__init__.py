"""Testing support – fakes and property-based generators.

Import in tests::

    from refcache.testing.fakes import FailingCacheStore, RecordingSource
    from refcache.testing.generators import region_strategy
"""

from refcache.testing.fakes import (
    FailingCacheStore,
    FakeClock,
    FakeMetricsRegistry,
    RaisingCacheStore,
    RecordingCacheStore,
    RecordingSource,
)

__all__ = [
    "FailingCacheStore",
    "FakeClock",
    "FakeMetricsRegistry",
    "RaisingCacheStore",
    "RecordingCacheStore",
    "RecordingSource",
]
