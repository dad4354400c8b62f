from typing import AsyncGenerator, Dict
from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.core.database import create_sessionmaker
from resource_hub.stats_provider import (
    CachingHttpClient,
    ModrinthStatsProvider,
    PolymartStatsProvider,
    SpigotStatsProvider,
    StatsService,
)


@pytest.fixture
def marketplace_routes() -> Dict[str, httpx.Response]:
    """Canned marketplace API responses keyed by URL. Tests add entries as needed."""
    return {}


@pytest.fixture
def stats_service(marketplace_routes) -> StatsService:
    """Stats service whose providers talk to a mock transport instead of the real marketplaces."""

    def handler(request: httpx.Request) -> httpx.Response:
        return marketplace_routes.get(str(request.url), httpx.Response(404))

    providers = [
        provider_cls(CachingHttpClient(provider_cls.name, client=httpx.Client(transport=httpx.MockTransport(handler))))
        for provider_cls in (PolymartStatsProvider, SpigotStatsProvider, ModrinthStatsProvider)
    ]
    service = StatsService(providers)
    yield service
    service.close()


@pytest_asyncio.fixture(name="client")
async def client_fixture(test_engine, stats_service) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with mocked lifespan and overridden dependencies."""
    from resource_hub.core.database import get_session
    from resource_hub.server.main import app
    from resource_hub.server.services.deps import get_stats_service

    test_async_session_maker = create_sessionmaker(test_engine)

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with test_async_session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_stats_service] = lambda: stats_service

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("resource_hub.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            yield client

    app.dependency_overrides.clear()
