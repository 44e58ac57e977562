"""SQLAlchemy adapter – region table model, session factory and region source."""
from refcache.adapters.sqlalchemy.models import Base, RegionRow
from refcache.adapters.sqlalchemy.region_source import SqlAlchemyRegionSource
from refcache.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = ["Base", "RegionRow", "SqlAlchemyRegionSource", "SqlAlchemySessionFactory"]
