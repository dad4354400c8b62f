"""Unit tests for StatsService aggregation."""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from resource_hub.core.database.entities import Project
from resource_hub.core.models.domain import ProjectStats
from resource_hub.stats_provider import CachingHttpClient, StatsProvider, StatsService


class FixedStatsProvider(StatsProvider):
    """Provider that returns canned stats without doing any I/O."""

    name = "fixed"
    link_id = "fixed"
    endpoint_url = "https://mock/{id}"

    def __init__(self, stats: Optional[ProjectStats], *, enabled: bool = True, error: Exception = None) -> None:
        super().__init__(MagicMock(spec=CachingHttpClient), enabled=enabled)
        self.stats = stats
        self.error = error
        self.calls = 0

    def get_stats(self, project: Project) -> Optional[ProjectStats]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.stats

    def resolve_id(self, link_url: str) -> Optional[str]:
        return link_url

    def to_stats(self, payload) -> Optional[ProjectStats]:
        return None


@pytest.fixture
def project() -> Project:
    return Project(slug="demo")


class TestStatsService:
    def test_combines_all_provider_results(self, project):
        service = StatsService(
            [
                FixedStatsProvider(ProjectStats(download_count=100, average_rating=4.0, number_of_ratings=10)),
                FixedStatsProvider(ProjectStats(download_count=50, average_rating=5.0, number_of_ratings=30)),
                FixedStatsProvider(ProjectStats(download_count=25)),
            ]
        )

        stats = service.get_stats(project)

        assert stats.download_count == 175
        assert stats.number_of_ratings == 40
        assert stats.average_rating == pytest.approx(4.75)

    def test_providers_without_data_are_skipped(self, project):
        only = ProjectStats(download_count=9, average_rating=3.0, number_of_ratings=3)
        service = StatsService([FixedStatsProvider(None), FixedStatsProvider(only), FixedStatsProvider(None)])

        assert service.get_stats(project) == only

    def test_no_data_returns_none(self, project):
        assert StatsService([FixedStatsProvider(None)]).get_stats(project) is None
        assert StatsService([]).get_stats(project) is None

    def test_disabled_providers_are_not_called(self, project):
        disabled = FixedStatsProvider(ProjectStats(download_count=1), enabled=False)
        enabled = FixedStatsProvider(ProjectStats(download_count=2))
        service = StatsService([disabled, enabled])

        assert service.get_stats(project).download_count == 2
        assert disabled.calls == 0
        assert service.enabled_providers() == [enabled]

    def test_failing_provider_does_not_hide_others(self, project, caplog):
        service = StatsService(
            [
                FixedStatsProvider(None, error=RuntimeError("marketplace exploded")),
                FixedStatsProvider(ProjectStats(download_count=5)),
            ]
        )

        with caplog.at_level("WARNING", logger="resource_hub.stats_provider.service"):
            stats = service.get_stats(project)

        assert stats.download_count == 5
        assert "marketplace exploded" in caplog.text

    def test_close_closes_every_http_client(self):
        providers = [FixedStatsProvider(None), FixedStatsProvider(None, enabled=False)]

        StatsService(providers).close()

        for provider in providers:
            provider.http.close.assert_called_once()
