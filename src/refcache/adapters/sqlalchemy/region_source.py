"""SQLAlchemy adapter – SqlAlchemyRegionSource."""
from __future__ import annotations

from typing import Any, Callable

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from refcache.adapters.sqlalchemy.models import RegionRow
from refcache.application.regions import Region
from refcache.kernel.errors import ConnectionError, InfrastructureError


class SqlAlchemyRegionSource:
    """RegionSource reading the ``regions`` table.

    *session_factory* is any zero-argument callable returning a session usable
    as a context manager (``sessionmaker`` or :class:`SqlAlchemySessionFactory`).
    """

    def __init__(self, session_factory: Callable[[], Any]) -> None:
        self._session_factory = session_factory

    def children_of(self, parent_id: int) -> list[Region]:
        stmt = select(RegionRow).where(RegionRow.parent_id == parent_id).order_by(RegionRow.id)
        try:
            with self._session_factory() as session:
                rows = session.execute(stmt).scalars().all()
                return [row.to_region() for row in rows]
        except DBAPIError as exc:
            if exc.connection_invalidated:
                raise ConnectionError("regions", cause=exc) from exc
            raise InfrastructureError(f"Region query failed: {exc}", cause=exc) from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Region query failed: {exc}", cause=exc) from exc


__all__ = ["SqlAlchemyRegionSource"]
