"""Polymart marketplace stats provider."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from resource_hub.core.models.domain import ProjectStats

from .base import StatsProvider, numeric_suffix_id


class PolymartRating(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int = 0
    stars: float = 0.0


class PolymartResource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    downloads: int
    reviews: PolymartRating


class PolymartResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool
    resource: Optional[PolymartResource] = None


class PolymartData(BaseModel):
    """Envelope of ``getResourceInfo``: ``{"response": {...}}``."""

    model_config = ConfigDict(extra="ignore")

    response: PolymartResponse


class PolymartStatsProvider(StatsProvider[PolymartData]):
    """Reads downloads and reviews from the Polymart ``getResourceInfo`` API."""

    name = "polymart"
    link_id = "polymart"
    endpoint_url = "https://api.polymart.org/v1/getResourceInfo?resource_id={id}"
    response_model = PolymartData

    def resolve_id(self, link_url: str) -> Optional[str]:
        return numeric_suffix_id(link_url)

    def to_stats(self, payload: PolymartData) -> Optional[ProjectStats]:
        res = payload.response
        if not res.success or res.resource is None:
            return None
        return ProjectStats(
            download_count=res.resource.downloads,
            average_rating=res.resource.reviews.stars,
            number_of_ratings=res.resource.reviews.count,
        )
