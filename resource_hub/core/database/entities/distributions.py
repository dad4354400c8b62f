"""
Distribution entity models.

A distribution is one build target of a project (for example a platform or
server flavour). Versions are published per project, channel and distribution.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base


class DistributionBase(Base):
    """Base fields for a distribution."""

    name: str = Field(max_length=64, description="Distribution identifier, unique per project")
    description: Optional[str] = Field(default=None, description="Human-readable description")
    archived: bool = Field(default=False, description="Whether new versions are no longer published")
    sort_order: int = Field(default=0, description="Display ordering, ascending")


class Distribution(DistributionBase, table=True):
    """Persistent distribution of a project.

    Table: distributions
    """

    __tablename__ = "distributions"
    __table_args__ = (UniqueConstraint("project_slug", "name", name="uq_distributions_project_name"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    project_slug: str = Field(foreign_key="projects.slug", index=True, max_length=64)

    def __repr__(self) -> str:
        return f"Distribution(id={self.id}, project={self.project_slug}, name={self.name})"
