from .common import MessageResponse, OkResponse
from .place import PlaceResponse, PlaceWriteRequest

__all__ = [
    "MessageResponse",
    "OkResponse",
    "PlaceResponse",
    "PlaceWriteRequest",
]
