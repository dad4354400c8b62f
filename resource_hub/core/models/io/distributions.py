"""
Distribution I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DistributionRead(BaseModel):
    """Schema for reading a distribution from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    archived: bool
    sort_order: int
    project_slug: str


class DistributionCreate(BaseModel):
    """Schema for creating a distribution via the API."""

    name: str = Field(min_length=1, max_length=64)
    description: Optional[str] = None
    archived: bool = False
    sort_order: int = 0
