"""Testing generators – Hypothesis strategies."""
from refcache.testing.generators.strategies import (
    json_record_strategy,
    region_collection_strategy,
    region_strategy,
)

__all__ = ["json_record_strategy", "region_collection_strategy", "region_strategy"]
