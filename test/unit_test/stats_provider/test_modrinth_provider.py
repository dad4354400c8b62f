"""Unit tests for the Modrinth stats provider."""

import httpx
import pytest

from resource_hub.core.models.domain import ProjectStats
from resource_hub.stats_provider import ModrinthStatsProvider


API_URL = "https://api.modrinth.com/v2/project/demo-plugin"


@pytest.fixture
def provider(make_http):
    http, _ = make_http(
        {API_URL: httpx.Response(200, json={"slug": "demo-plugin", "downloads": 3210, "followers": 40})},
        name="modrinth",
    )
    return ModrinthStatsProvider(http)


class TestModrinthStatsProvider:
    @pytest.mark.parametrize(
        "link, expected",
        [
            ("https://modrinth.com/plugin/demo-plugin", "demo-plugin"),
            ("https://modrinth.com/plugin/demo-plugin/", "demo-plugin"),
            ("https://modrinth.com/mod/AABBCCDD?tab=versions", "AABBCCDD"),
            ("https://modrinth.com/plugin/demo-plugin/versions", "demo-plugin"),
            ("https://modrinth.com/datapack/demo-plugin/gallery/", "demo-plugin"),
            ("https://modrinth.com/", None),
            ("https://modrinth.com/plugin", None),
            ("https://modrinth.com/user/someone", None),
            ("https://modrinth.com/plugin/a%00b", None),
        ],
    )
    def test_resolve_id(self, provider, link, expected):
        assert provider.resolve_id(link) == expected

    def test_reports_downloads_without_ratings(self, provider, make_project):
        stats = provider.get_stats(make_project(modrinth="https://modrinth.com/plugin/demo-plugin"))

        assert stats == ProjectStats(download_count=3210, average_rating=0.0, number_of_ratings=0)

    def test_subpage_link_queries_project(self, provider, make_project):
        stats = provider.get_stats(make_project(modrinth="https://modrinth.com/plugin/demo-plugin/changelog"))

        assert stats.download_count == 3210

    def test_control_character_in_link_returns_none(self, provider, make_project):
        assert provider.get_stats(make_project(modrinth="https://modrinth.com/plugin/a%00b")) is None


def test_invalid_endpoint_url_returns_none(make_http, make_project):
    """A resolved id that cannot form a valid URL is reported as no data."""
    http, transport = make_http({}, name="modrinth")

    class UncheckedModrinthProvider(ModrinthStatsProvider):
        def resolve_id(self, link_url):
            return "a\x00b"

    provider = UncheckedModrinthProvider(http)

    assert provider.get_stats(make_project(modrinth="https://modrinth.com/plugin/demo")) is None
    assert transport.requests == []
