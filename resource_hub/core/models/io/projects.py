"""
Project I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from resource_hub.core.models.domain import ProjectMetadata, ProjectStats


class ProjectRead(BaseModel):
    """Schema for reading a project from the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    slug: str
    restricted: bool
    created_at: datetime
    metadata: ProjectMetadata = Field(validation_alias="project_metadata", description="Display metadata")


class ProjectCreate(BaseModel):
    """Schema for creating a project via the API."""

    slug: str = Field(min_length=1, max_length=64, pattern=r"^[a-z0-9][a-z0-9_-]*$")
    restricted: bool = Field(default=False, description="Whether downloads require a purchase")
    metadata: ProjectMetadata = Field(default_factory=ProjectMetadata)


class ProjectUpdate(BaseModel):
    """Schema for updating a project via the API. Omitted fields are left unchanged."""

    restricted: Optional[bool] = None
    metadata: Optional[ProjectMetadata] = None


class ProjectStatsRead(BaseModel):
    """Aggregated marketplace stats of a project; ``stats`` is null when no marketplace had data."""

    project: str
    stats: Optional[ProjectStats] = None
