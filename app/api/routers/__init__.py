"""Router modules exposed for convenient imports."""

from . import healthz, places

__all__ = [
    "healthz",
    "places",
]
