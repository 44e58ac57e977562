"""Observability – structured logging helpers."""
from refcache.observability.logging.factory import JsonLoggerFactory
from refcache.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
