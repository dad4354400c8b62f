"""Aggregation of marketplace stats across providers."""

from __future__ import annotations

from typing import List, Optional, Sequence

from resource_hub.core.database.entities.projects import Project
from resource_hub.core.logging_config import get_logger
from resource_hub.core.models.domain import ProjectStats

from .base import StatsProvider

logger = get_logger(__name__)


class StatsService:
    """
    Combine the stats every enabled provider reports for a project.

    Responsibilities:
    - get_stats: query each enabled provider and merge the non-empty results
    - close: release the providers' HTTP clients
    """

    def __init__(self, providers: Sequence[StatsProvider]) -> None:
        self.providers: List[StatsProvider] = list(providers)

    def enabled_providers(self) -> List[StatsProvider]:
        return [p for p in self.providers if p.is_enabled()]

    def get_stats(self, project: Project) -> Optional[ProjectStats]:
        """
        Aggregate stats for a project.

        Providers without data are skipped. A provider that fails unexpectedly
        is logged and skipped as well, so one broken marketplace never hides
        the others.

        Returns:
            Combined ProjectStats, or None if no provider returned anything.
        """
        combined: Optional[ProjectStats] = None
        for provider in self.enabled_providers():
            try:
                stats = provider.get_stats(project)
            except Exception as e:
                logger.warning(
                    "Stats provider %s failed for project %s: %s", provider.name, project.slug, e, exc_info=True
                )
                continue
            if stats is None:
                continue
            logger.debug("Stats provider %s returned %s for project %s", provider.name, stats, project.slug)
            combined = stats if combined is None else combined.combine(stats)
        return combined

    def close(self) -> None:
        for provider in self.providers:
            provider.http.close()
