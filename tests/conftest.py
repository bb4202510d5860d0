# tests/conftest.py
import os

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test if available; app settings are read at import time
load_dotenv(".env.test", override=False)
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_FORMAT", "json")

from app.api.deps import get_place_service  # noqa: E402
from app.core.config import Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from app.services.places import PlaceService  # noqa: E402
from tests.fakes import InMemoryPlaceRepository, StubUnitOfWork  # noqa: E402


@pytest.fixture
def place_repo() -> InMemoryPlaceRepository:
    return InMemoryPlaceRepository()


@pytest.fixture
def test_app(place_repo):
    app = create_app(Settings(app_env="test", log_format="json", sentry_dsn=None))
    app.dependency_overrides[get_place_service] = lambda: PlaceService(
        lambda: StubUnitOfWork(place_repo)
    )
    return app


@pytest_asyncio.fixture
async def app_client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
