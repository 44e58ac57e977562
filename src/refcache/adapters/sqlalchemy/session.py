"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from refcache.config.settings import LookupSettings


def _require_sqlalchemy() -> None:
    try:
        import sqlalchemy  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'refcache[sqlalchemy]' to use the SQLAlchemy adapter") from exc


class SqlAlchemySessionFactory:
    """Creates synchronous SQLAlchemy sessions from an engine URL."""

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        _require_sqlalchemy()
        from sqlalchemy import create_engine
        from sqlalchemy.orm import sessionmaker

        self._engine = create_engine(database_url, **engine_kwargs)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: "LookupSettings", **engine_kwargs: Any) -> "SqlAlchemySessionFactory":
        return cls(settings.database_url, **engine_kwargs)

    @property
    def engine(self) -> Any:
        return self._engine

    def __call__(self) -> Any:
        return self._session_factory()

    def dispose(self) -> None:
        self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
