"""SpigotMC stats provider, backed by the Spiget REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from resource_hub.core.models.domain import ProjectStats

from .base import StatsProvider, numeric_suffix_id


class SpigetRating(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int = 0
    average: float = 0.0


class SpigetResource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    downloads: int
    rating: SpigetRating = SpigetRating()


class SpigotStatsProvider(StatsProvider[SpigetResource]):
    """Reads downloads and ratings of a SpigotMC resource."""

    name = "spigot"
    link_id = "spigot"
    endpoint_url = "https://api.spiget.org/v2/resources/{id}"
    response_model = SpigetResource

    def resolve_id(self, link_url: str) -> Optional[str]:
        return numeric_suffix_id(link_url)

    def to_stats(self, payload: SpigetResource) -> Optional[ProjectStats]:
        return ProjectStats(
            download_count=payload.downloads,
            average_rating=payload.rating.average,
            number_of_ratings=payload.rating.count,
        )
