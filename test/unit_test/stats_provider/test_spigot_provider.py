"""Unit tests for the SpigotMC (Spiget) stats provider."""

import httpx
import pytest

from resource_hub.core.models.domain import ProjectStats
from resource_hub.stats_provider import SpigotStatsProvider


LINK = "https://www.spigotmc.org/resources/demo-plugin.5678/"
API_URL = "https://api.spiget.org/v2/resources/5678"


@pytest.fixture
def provider_for(make_http):
    def _provider(routes):
        http, transport = make_http(routes, name="spigot")
        return SpigotStatsProvider(http), transport

    return _provider


class TestSpigotStatsProvider:
    def test_maps_downloads_and_rating(self, provider_for, make_project):
        body = {"id": 5678, "name": "Demo", "downloads": 20000, "rating": {"count": 80, "average": 4.8}}
        provider, transport = provider_for({API_URL: httpx.Response(200, json=body)})

        stats = provider.get_stats(make_project(spigot=LINK))

        assert stats == ProjectStats(download_count=20000, average_rating=4.8, number_of_ratings=80)
        assert str(transport.requests[0].url) == API_URL

    def test_missing_rating_defaults_to_zero(self, provider_for, make_project):
        provider, _ = provider_for({API_URL: httpx.Response(200, json={"downloads": 7})})

        assert provider.get_stats(make_project(spigot=LINK)) == ProjectStats(download_count=7)

    def test_transport_error_returns_none(self, make_http, make_project):
        def refuse(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        from resource_hub.stats_provider import CachingHttpClient

        http = CachingHttpClient("spigot", client=httpx.Client(transport=httpx.MockTransport(refuse)))

        assert SpigotStatsProvider(http).get_stats(make_project(spigot=LINK)) is None

    def test_not_found_returns_none(self, provider_for, make_project):
        provider, _ = provider_for({})

        assert provider.get_stats(make_project(spigot=LINK)) is None

    def test_repeated_lookups_are_served_from_cache(self, provider_for, make_project):
        provider, transport = provider_for({API_URL: httpx.Response(200, json={"downloads": 1})})
        project = make_project(spigot=LINK)

        provider.get_stats(project)
        provider.get_stats(project)

        assert len(transport.requests) == 1

    def test_out_of_range_values_return_none(self, provider_for, make_project, caplog):
        body = {"downloads": 10, "rating": {"count": 2, "average": -4.0}}
        provider, _ = provider_for({API_URL: httpx.Response(200, json=body)})

        with caplog.at_level("WARNING", logger="resource_hub.stats_provider.base"):
            assert provider.get_stats(make_project(spigot=LINK)) is None

        assert "Out of range stats from spigot resource 5678" in caplog.text
