"""
Project statistics domain model.

Marketplaces report downloads and ratings in their own shapes; every stats
provider normalizes them into a ``ProjectStats`` record, and records from
several marketplaces are merged with :meth:`ProjectStats.combine`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProjectStats(BaseModel):
    """Normalized usage statistics for one project."""

    model_config = ConfigDict(frozen=True)

    download_count: int = Field(default=0, ge=0, description="Total downloads")
    average_rating: float = Field(default=0.0, ge=0.0, description="Average rating in stars")
    number_of_ratings: int = Field(default=0, ge=0, description="How many ratings the average is built from")

    def combine(self, other: ProjectStats) -> ProjectStats:
        """Merge two records.

        Downloads and rating counts are summed. The average rating is weighted
        by each side's rating count, so a marketplace without ratings does not
        drag the average down.
        """
        ratings = self.number_of_ratings + other.number_of_ratings
        if ratings == 0:
            average = 0.0
        else:
            average = (
                self.average_rating * self.number_of_ratings + other.average_rating * other.number_of_ratings
            ) / ratings
        return ProjectStats(
            download_count=self.download_count + other.download_count,
            average_rating=average,
            number_of_ratings=ratings,
        )
