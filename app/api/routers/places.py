# app/api/routers/places.py
from fastapi import APIRouter, Depends

from app.api.deps import get_place_service
from app.schemas.common import MessageResponse
from app.schemas.place import PlaceResponse, PlaceWriteRequest
from app.services.places import PlaceService, parse_place_id

router = APIRouter(prefix="/api/places", tags=["places"])

_NOT_FOUND = {404: {"model": MessageResponse, "description": "Place is not found"}}
_INVALID = {400: {"model": MessageResponse, "description": "Please enter valid place data"}}
_INTERNAL = {500: {"model": MessageResponse, "description": "Internal Server Error"}}


@router.get(
    "",
    response_model=list[PlaceResponse],
    summary="List places",
    description="Newest first.",
    responses=_INTERNAL,
)
async def list_places(svc: PlaceService = Depends(get_place_service)):
    return await svc.list()


@router.get(
    "/{place_id}",
    response_model=PlaceResponse,
    summary="Get a place by id",
    responses={**_NOT_FOUND, **_INTERNAL},
)
async def get_place(place_id: str, svc: PlaceService = Depends(get_place_service)):
    return await svc.get(parse_place_id(place_id))


@router.post(
    "",
    status_code=201,
    response_model=PlaceResponse,
    summary="Create a place",
    description="`name`, `location` and `image` are required and must not be blank.",
    responses={**_INVALID, **_INTERNAL},
)
async def create_place(
    payload: PlaceWriteRequest,
    svc: PlaceService = Depends(get_place_service),
):
    return await svc.create(payload)


@router.put(
    "/{place_id}",
    response_model=PlaceResponse,
    summary="Replace a place",
    responses={**_NOT_FOUND, **_INVALID, **_INTERNAL},
)
async def update_place(
    place_id: str,
    payload: PlaceWriteRequest,
    svc: PlaceService = Depends(get_place_service),
):
    return await svc.update(parse_place_id(place_id), payload)


@router.delete(
    "/{place_id}",
    response_model=MessageResponse,
    summary="Delete a place",
    responses={**_NOT_FOUND, **_INTERNAL},
)
async def delete_place(place_id: str, svc: PlaceService = Depends(get_place_service)):
    await svc.delete(parse_place_id(place_id))
    return MessageResponse(message="Place deleted")
