"""SQLAlchemy implementations of repository interfaces."""

from .place import SqlAlchemyPlaceRepository

__all__ = [
    "SqlAlchemyPlaceRepository",
]
