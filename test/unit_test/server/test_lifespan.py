"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup initializes the database and that shutdown releases
the stats service's HTTP clients.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI

from resource_hub.server.main import lifespan
from resource_hub.server.services.deps import get_stats_service

pytestmark = pytest.mark.asyncio


class TestLifespan:
    async def test_startup_initializes_database(self):
        with patch("resource_hub.server.main.init_db", new_callable=AsyncMock) as mock_init_db:
            async with lifespan(FastAPI()):
                mock_init_db.assert_awaited_once()

    async def test_startup_survives_database_failure(self):
        with patch("resource_hub.server.main.init_db", new_callable=AsyncMock, side_effect=ConnectionError("down")):
            with patch("resource_hub.server.main.logger") as mock_logger:
                async with lifespan(FastAPI()):
                    pass

        mock_logger.error.assert_called_once()
        assert "Database initialization failed" in mock_logger.error.call_args[0][0]

    async def test_shutdown_closes_stats_service(self):
        get_stats_service.cache_clear()
        service = get_stats_service()
        with patch.object(service, "close", MagicMock()) as mock_close:
            with patch("resource_hub.server.main.init_db", new_callable=AsyncMock):
                async with lifespan(FastAPI()):
                    pass

        mock_close.assert_called_once()
        assert get_stats_service.cache_info().currsize == 0
        service.close()

    async def test_shutdown_without_stats_service_does_not_build_one(self):
        get_stats_service.cache_clear()

        with patch("resource_hub.server.main.init_db", new_callable=AsyncMock):
            async with lifespan(FastAPI()):
                pass

        assert get_stats_service.cache_info().currsize == 0
