"""Observability – metrics ports and no-op backend."""
from refcache.observability.metrics.noop import NoopMetrics
from refcache.observability.metrics.ports import Counter, Histogram, Metrics

__all__ = ["Counter", "Histogram", "Metrics", "NoopMetrics"]
