from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class PlaceWriteRequest(BaseModel):
    # Presence is checked by the service so that missing fields produce the
    # domain validation message rather than a schema error.
    name: str | None = Field(default=None, description="Place name")
    location: str | None = Field(default=None, description="Free-form location")
    image: str | None = Field(default=None, description="Image URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Old Harbour",
                    "location": "Marseille, France",
                    "image": "https://example.com/harbour.jpg",
                }
            ]
        }
    }


class PlaceResponse(BaseModel):
    id: int
    name: str
    location: str
    image: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
