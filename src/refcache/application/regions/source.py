"""Application regions – RegionSource port and in-memory implementation."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from refcache.application.regions.region import Region

__all__ = ["InMemoryRegionSource", "RegionSource"]


@runtime_checkable
class RegionSource(Protocol):
    """Port: authoritative store of the region hierarchy."""

    def children_of(self, parent_id: int) -> list[Region]: ...


class InMemoryRegionSource:
    """RegionSource backed by a list of regions, ordered by id."""

    def __init__(self, regions: Iterable[Region] = ()) -> None:
        self._regions: dict[int, Region] = {r.id: r for r in regions}

    def add(self, region: Region) -> None:
        self._regions[region.id] = region

    def children_of(self, parent_id: int) -> list[Region]:
        return sorted(
            (r for r in self._regions.values() if r.parent_id == parent_id),
            key=lambda r: r.id,
        )
