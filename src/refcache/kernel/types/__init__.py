"""Kernel value types — public re-export surface.

Modules:
  outcome.py — Ok, Miss, Fault, CacheOutcome
"""

from refcache.kernel.types.outcome import CacheOutcome, Fault, Miss, Ok

__all__ = ["CacheOutcome", "Fault", "Miss", "Ok"]
