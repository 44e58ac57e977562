"""Kernel time – Clock port + implementations."""
from refcache.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
