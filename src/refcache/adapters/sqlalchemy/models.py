"""SQLAlchemy ORM model for the region hierarchy table."""
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from refcache.application.regions import Region


class Base(DeclarativeBase):
    pass


class RegionRow(Base):
    """One row per region; children point at their parent through ``parent_id``."""

    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("regions.id"), index=True, nullable=True)
    level: Mapped[int] = mapped_column(Integer, default=0)
    code: Mapped[str | None] = mapped_column(String(32), nullable=True)

    def to_region(self) -> Region:
        return Region(
            id=self.id,
            name=self.name,
            parent_id=self.parent_id,
            level=self.level,
            code=self.code,
        )


__all__ = ["Base", "RegionRow"]
