"""Unit tests for the Polymart stats provider."""

import httpx
import pytest

from resource_hub.core.models.domain import ProjectStats
from resource_hub.stats_provider import PolymartStatsProvider


LINK = "https://polymart.org/resource/demo-plugin.1234"
API_URL = "https://api.polymart.org/v1/getResourceInfo?resource_id=1234"


def polymart_body(success=True, downloads=1500, count=12, stars=4.5):
    resource = {"id": "1234", "title": "Demo", "downloads": downloads, "reviews": {"count": count, "stars": stars}}
    return {"response": {"success": success, "resource": resource if success else None}}


@pytest.fixture
def provider_for(make_http):
    def _provider(routes):
        http, transport = make_http(routes, name="polymart")
        return PolymartStatsProvider(http), transport

    return _provider


class TestPolymartStatsProvider:
    def test_maps_downloads_and_reviews(self, provider_for, make_project):
        provider, transport = provider_for({API_URL: httpx.Response(200, json=polymart_body())})

        stats = provider.get_stats(make_project(polymart=LINK))

        assert stats == ProjectStats(download_count=1500, average_rating=4.5, number_of_ratings=12)
        assert str(transport.requests[0].url) == API_URL

    def test_trailing_slash_on_link_is_ignored(self, provider_for, make_project):
        provider, _ = provider_for({API_URL: httpx.Response(200, json=polymart_body())})

        assert provider.get_stats(make_project(polymart=LINK + "/")) is not None

    def test_unsuccessful_response_returns_none(self, provider_for, make_project):
        provider, _ = provider_for({API_URL: httpx.Response(200, json=polymart_body(success=False))})

        assert provider.get_stats(make_project(polymart=LINK)) is None

    def test_missing_link_returns_none_without_request(self, provider_for, make_project):
        provider, transport = provider_for({})

        assert provider.get_stats(make_project(spigot="https://spigotmc.org/resources/demo.1/")) is None
        assert transport.requests == []

    def test_non_numeric_id_returns_none_without_request(self, provider_for, make_project):
        provider, transport = provider_for({})

        assert provider.get_stats(make_project(polymart="https://polymart.org/resource/demo")) is None
        assert transport.requests == []

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, json={"error": "boom"}),
            httpx.Response(404),
            httpx.Response(200, content=b""),
            httpx.Response(200, content=b"<html>not json</html>"),
            httpx.Response(200, json={"unexpected": True}),
            httpx.Response(200, json=polymart_body(downloads=-1)),
            httpx.Response(200, json=polymart_body(count=-3)),
        ],
    )
    def test_bad_responses_return_none(self, provider_for, response, make_project):
        provider, _ = provider_for({API_URL: response})

        assert provider.get_stats(make_project(polymart=LINK)) is None

    def test_non_success_status_is_logged(self, provider_for, caplog, make_project):
        provider, _ = provider_for({API_URL: httpx.Response(502)})

        with caplog.at_level("WARNING", logger="resource_hub.stats_provider.base"):
            provider.get_stats(make_project(polymart=LINK))

        assert "Got 502 fetching polymart resource" in caplog.text
