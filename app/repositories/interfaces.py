"""Repository abstractions for the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass
class PlaceRow:
    id: int
    name: str
    location: str
    image: str
    created_at: datetime | None
    updated_at: datetime | None


class PlaceRepository(Protocol):
    """Repository boundary for place persistence."""

    async def list_all(self) -> list[PlaceRow]: ...

    async def get_by_id(self, place_id: int) -> PlaceRow | None: ...

    async def create(self, *, name: str, location: str, image: str) -> PlaceRow: ...

    async def update(
        self, place_id: int, *, name: str, location: str, image: str
    ) -> PlaceRow | None: ...

    async def delete(self, place_id: int) -> bool: ...
