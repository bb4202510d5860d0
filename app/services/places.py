"""Place use cases backed by repository interfaces."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from app.core.exceptions import NotFoundError, ValidationError
from app.infra.unit_of_work import UnitOfWork
from app.repositories.interfaces import PlaceRow
from app.schemas.place import PlaceResponse, PlaceWriteRequest

UnitOfWorkFactory = Callable[[], UnitOfWork]

PLACE_NOT_FOUND_MESSAGE = "Place is not found"
INVALID_PLACE_DATA_MESSAGE = "Please enter valid place data"
_MAX_PLACE_ID = 2**31 - 1

logger = structlog.get_logger(__name__)


def parse_place_id(raw: str) -> int:
    """Path ids that are not positive integers can never match a place."""
    try:
        place_id = int(raw)
    except ValueError:
        raise NotFoundError(PLACE_NOT_FOUND_MESSAGE) from None
    # ids beyond the int4 primary key cannot exist
    if place_id <= 0 or place_id > _MAX_PLACE_ID:
        raise NotFoundError(PLACE_NOT_FOUND_MESSAGE)
    return place_id


def _required(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(INVALID_PLACE_DATA_MESSAGE)
    return value.strip()


def _to_response(row: PlaceRow) -> PlaceResponse:
    return PlaceResponse(
        id=row.id,
        name=row.name,
        location=row.location,
        image=row.image,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PlaceService:
    """Use cases for reading and writing places."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list(self) -> list[PlaceResponse]:
        async with self._uow_factory() as uow:
            rows = await uow.places.list_all()
        return [_to_response(row) for row in rows]

    async def get(self, place_id: int) -> PlaceResponse:
        async with self._uow_factory() as uow:
            row = await uow.places.get_by_id(place_id)
        if row is None:
            raise NotFoundError(PLACE_NOT_FOUND_MESSAGE)
        return _to_response(row)

    async def create(self, payload: PlaceWriteRequest) -> PlaceResponse:
        fields = _validated_fields(payload)
        async with self._uow_factory() as uow:
            row = await uow.places.create(**fields)
        logger.info("place_created", place_id=row.id)
        return _to_response(row)

    async def update(self, place_id: int, payload: PlaceWriteRequest) -> PlaceResponse:
        fields = _validated_fields(payload)
        async with self._uow_factory() as uow:
            row = await uow.places.update(place_id, **fields)
            if row is None:
                raise NotFoundError(PLACE_NOT_FOUND_MESSAGE)
        logger.info("place_updated", place_id=row.id)
        return _to_response(row)

    async def delete(self, place_id: int) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.places.delete(place_id)
            if not deleted:
                raise NotFoundError(PLACE_NOT_FOUND_MESSAGE)
        logger.info("place_deleted", place_id=place_id)


def _validated_fields(payload: PlaceWriteRequest) -> dict[str, str]:
    return {
        "name": _required(payload.name),
        "location": _required(payload.location),
        "image": _required(payload.image),
    }
