"""
Version entity models.

A version is one published build of a project, released on a channel for a
distribution.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class Version(Base, table=True):
    """Persistent project version.

    Table: versions
    """

    __tablename__ = "versions"
    __table_args__ = (
        UniqueConstraint(
            "project_slug", "channel_id", "distribution_id", "name", name="uq_versions_project_channel_dist_name"
        ),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=64, description="Version string (e.g., '4.6.2')")
    timestamp: datetime = Field(default_factory=utc_now, index=True)
    changelog: Optional[str] = Field(default=None)

    project_slug: str = Field(foreign_key="projects.slug", index=True, max_length=64)
    channel_id: int = Field(foreign_key="channels.id", index=True)
    distribution_id: int = Field(foreign_key="distributions.id", index=True)

    def __repr__(self) -> str:
        return f"Version(id={self.id}, project={self.project_slug}, name={self.name})"
