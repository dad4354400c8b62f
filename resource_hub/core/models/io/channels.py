"""
Channel I/O models for API requests and responses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChannelRead(BaseModel):
    """Schema for reading a release channel from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ChannelCreate(BaseModel):
    """Schema for creating a release channel via the API."""

    name: str = Field(min_length=1, max_length=64, description="Channel name (e.g., 'release', 'beta')")
