from __future__ import annotations

import pytest

from app.core.exceptions import NotFoundError, ValidationError
from app.schemas.place import PlaceWriteRequest
from app.services.places import PlaceService, parse_place_id
from tests.fakes import InMemoryPlaceRepository, StubUnitOfWork


def _service(repo: InMemoryPlaceRepository, uows: list[StubUnitOfWork] | None = None):
    def factory():
        uow = StubUnitOfWork(repo)
        if uows is not None:
            uows.append(uow)
        return uow

    return PlaceService(factory)


def _payload(**overrides) -> PlaceWriteRequest:
    data = {"name": "Old Harbour", "location": "Marseille", "image": "https://example.com/h.jpg"}
    data.update(overrides)
    return PlaceWriteRequest(**data)


@pytest.mark.asyncio
async def test_create_strips_and_persists():
    repo = InMemoryPlaceRepository()
    uows: list[StubUnitOfWork] = []
    service = _service(repo, uows)

    place = await service.create(_payload(name="  Old Harbour  "))

    assert place.id == 1
    assert place.name == "Old Harbour"
    assert repo.rows[1].name == "Old Harbour"
    assert uows[0].committed is True


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "location", "image"])
async def test_create_requires_every_field(missing):
    repo = InMemoryPlaceRepository()
    uows: list[StubUnitOfWork] = []
    service = _service(repo, uows)

    with pytest.raises(ValidationError) as excinfo:
        await service.create(_payload(**{missing: None}))

    assert excinfo.value.message == "Please enter valid place data"
    assert repo.rows == {}
    # validation happens before any unit of work is opened
    assert uows == []


@pytest.mark.asyncio
@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
async def test_create_rejects_blank_values(blank):
    service = _service(InMemoryPlaceRepository())
    with pytest.raises(ValidationError):
        await service.create(_payload(location=blank))


@pytest.mark.asyncio
async def test_get_missing_place_raises_not_found():
    service = _service(InMemoryPlaceRepository())
    with pytest.raises(NotFoundError) as excinfo:
        await service.get(42)
    assert excinfo.value.message == "Place is not found"


@pytest.mark.asyncio
async def test_list_returns_newest_first():
    repo = InMemoryPlaceRepository()
    service = _service(repo)
    await service.create(_payload(name="First"))
    await service.create(_payload(name="Second"))

    places = await service.list()

    assert [p.name for p in places] == ["Second", "First"]


@pytest.mark.asyncio
async def test_update_replaces_fields():
    repo = InMemoryPlaceRepository()
    service = _service(repo)
    created = await service.create(_payload())

    updated = await service.update(created.id, _payload(name="New Harbour", image="https://x/y.png"))

    assert updated.id == created.id
    assert updated.name == "New Harbour"
    assert updated.image == "https://x/y.png"


@pytest.mark.asyncio
async def test_update_missing_place_rolls_back():
    repo = InMemoryPlaceRepository()
    uows: list[StubUnitOfWork] = []
    service = _service(repo, uows)

    with pytest.raises(NotFoundError):
        await service.update(7, _payload())
    assert uows[0].rolled_back is True


@pytest.mark.asyncio
async def test_update_validates_before_lookup():
    service = _service(InMemoryPlaceRepository())
    # invalid payload wins over unknown id once the id itself is well-formed
    with pytest.raises(ValidationError):
        await service.update(7, _payload(name=None))


@pytest.mark.asyncio
async def test_delete_removes_and_then_reports_not_found():
    repo = InMemoryPlaceRepository()
    service = _service(repo)
    created = await service.create(_payload())

    await service.delete(created.id)
    assert repo.rows == {}

    with pytest.raises(NotFoundError):
        await service.delete(created.id)


@pytest.mark.parametrize("raw", ["abc", "0", "-1", "1.5", "", "99999999999"])
def test_parse_place_id_rejects_non_ids(raw):
    with pytest.raises(NotFoundError):
        parse_place_id(raw)


def test_parse_place_id_accepts_positive_int():
    assert parse_place_id("17") == 17
