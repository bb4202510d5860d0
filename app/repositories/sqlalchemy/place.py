"""SQLAlchemy implementation of the place repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Place
from app.repositories.interfaces import PlaceRepository, PlaceRow


def _to_row(place: Place) -> PlaceRow:
    return PlaceRow(
        id=int(place.id),
        name=str(place.name),
        location=str(place.location),
        image=str(place.image),
        created_at=place.created_at,
        updated_at=place.updated_at,
    )


class SqlAlchemyPlaceRepository(PlaceRepository):
    """Default SQLAlchemy-backed implementation."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[PlaceRow]:
        stmt = select(Place).order_by(Place.created_at.desc(), Place.id.desc())
        places = (await self._session.scalars(stmt)).all()
        return [_to_row(p) for p in places]

    async def get_by_id(self, place_id: int) -> PlaceRow | None:
        place = await self._session.get(Place, place_id)
        return _to_row(place) if place is not None else None

    async def create(self, *, name: str, location: str, image: str) -> PlaceRow:
        place = Place(name=name, location=location, image=image)
        self._session.add(place)
        await self._session.flush()
        # server defaults (timestamps) are only known after a refresh
        await self._session.refresh(place)
        return _to_row(place)

    async def update(
        self, place_id: int, *, name: str, location: str, image: str
    ) -> PlaceRow | None:
        place = await self._session.get(Place, place_id)
        if place is None:
            return None
        place.name = name
        place.location = location
        place.image = image
        await self._session.flush()
        await self._session.refresh(place)
        return _to_row(place)

    async def delete(self, place_id: int) -> bool:
        place = await self._session.get(Place, place_id)
        if place is None:
            return False
        await self._session.delete(place)
        await self._session.flush()
        return True
