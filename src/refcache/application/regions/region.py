"""Application regions – Region record."""
from __future__ import annotations

import dataclasses
from typing import Any

__all__ = ["Region"]


@dataclasses.dataclass(frozen=True)
class Region:
    """Flattened region descriptor, one node of the region hierarchy."""

    id: int
    name: str
    parent_id: int | None = None
    level: int = 0
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Region":
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            parent_id=data.get("parent_id"),
            level=int(data.get("level", 0)),
            code=data.get("code"),
        )
