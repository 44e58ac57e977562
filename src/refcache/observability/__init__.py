"""Observability – logging and metrics."""
from refcache.observability.logging import JsonLoggerFactory, get_logger
from refcache.observability.metrics import Metrics, NoopMetrics

__all__ = ["JsonLoggerFactory", "Metrics", "NoopMetrics", "get_logger"]
