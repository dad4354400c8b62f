"""
Purchase entity models.

The ``purchases`` join table links users to the restricted projects they are
entitled to download.
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field

from ..base import Base, utc_now


class Purchase(Base, table=True):
    """A user's entitlement to one project.

    Table: purchases
    """

    __tablename__ = "purchases"

    user_id: str = Field(foreign_key="users.id", primary_key=True, max_length=32)
    project_slug: str = Field(foreign_key="projects.slug", primary_key=True, max_length=64)
    purchased_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Purchase(user_id={self.user_id}, project_slug={self.project_slug})"
