"""
Project metadata domain models.

The ``metadata`` document stored alongside every project row. It is kept as a
JSON column so new display fields do not require a schema change.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectLink(BaseModel):
    """An external page for a project, keyed by a short id such as ``polymart``."""

    id: str = Field(description="Link identifier (e.g., 'github', 'polymart', 'modrinth')")
    url: str = Field(description="Absolute URL of the linked page")


class ProjectMetadata(BaseModel):
    """Display metadata of a project."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(default=None, description="Display name")
    tagline: Optional[str] = Field(default=None, description="One-line description")
    archived: bool = Field(default=False, description="Whether the project is no longer maintained")
    listed: bool = Field(default=True, description="Whether the project shows up in public listings")
    links: List[ProjectLink] = Field(default_factory=list)

    def get_link_url(self, link_id: str) -> Optional[str]:
        for link in self.links:
            if link.id == link_id:
                return link.url
        return None
