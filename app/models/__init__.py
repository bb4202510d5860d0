# app/models/__init__.py
from .base import Base
from .place import Place

__all__ = [
    "Base",
    "Place",
]
