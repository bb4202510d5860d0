"""API dependency helpers and service providers."""

from app import db
from app.infra.unit_of_work import SqlAlchemyUnitOfWork
from app.services.places import PlaceService

__all__ = [
    "get_place_service",
]


def _uow_factory() -> SqlAlchemyUnitOfWork:
    # resolve the session factory per call so configure_engine() takes effect
    return SqlAlchemyUnitOfWork(db.SessionLocal)


def get_place_service() -> PlaceService:
    return PlaceService(_uow_factory)
