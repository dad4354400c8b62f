"""Modrinth stats provider.

Modrinth exposes download counts but no ratings, so its records carry zero
ratings and do not affect the combined average.
"""

from __future__ import annotations

import re
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict

from resource_hub.core.models.domain import ProjectStats

from .base import StatsProvider

# Page types in ``https://modrinth.com/<type>/<slug-or-id>[/<tab>]`` links
PROJECT_TYPES = frozenset({"project", "mod", "plugin", "datapack", "shader", "resourcepack", "modpack"})

PROJECT_ID_PATTERN = re.compile(r"^[\w!@$().+,'-]+$", re.ASCII)


class ModrinthProject(BaseModel):
    model_config = ConfigDict(extra="ignore")

    downloads: int
    followers: int = 0


class ModrinthStatsProvider(StatsProvider[ModrinthProject]):
    """Reads downloads of a Modrinth project by slug or id."""

    name = "modrinth"
    link_id = "modrinth"
    endpoint_url = "https://api.modrinth.com/v2/project/{id}"
    response_model = ModrinthProject

    def resolve_id(self, link_url: str) -> Optional[str]:
        """Slug or id following the project type segment, restricted to URL-safe characters."""
        try:
            segments = [s for s in httpx.URL(link_url).path.split("/") if s]
        except httpx.InvalidURL:
            return None
        if len(segments) < 2 or segments[0] not in PROJECT_TYPES:
            return None
        project_id = segments[1]
        return project_id if PROJECT_ID_PATTERN.match(project_id) else None

    def to_stats(self, payload: ModrinthProject) -> Optional[ProjectStats]:
        return ProjectStats(download_count=payload.downloads)
