"""
Version I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VersionRead(BaseModel):
    """Schema for reading a version from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    timestamp: datetime
    changelog: Optional[str] = None
    project_slug: str
    channel_id: int
    distribution_id: int


class VersionCreate(BaseModel):
    """Schema for publishing a version via the API."""

    name: str = Field(min_length=1, max_length=64, description="Version string (e.g., '4.6.2')")
    distribution: str = Field(description="Name of the project distribution the build targets")
    changelog: Optional[str] = None
    timestamp: Optional[datetime] = Field(default=None, description="Release time; defaults to now")
