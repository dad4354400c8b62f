"""
Project entity models.

This module contains the database entity for distributable projects. Display
data lives in a JSON ``details`` document validated by
:class:`~resource_hub.core.models.domain.ProjectMetadata`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ValidationError
from sqlalchemy import JSON
from sqlmodel import Field

from resource_hub.core.logging_config import get_logger
from resource_hub.core.models.domain import ProjectMetadata

from ..base import Base, utc_now

logger = get_logger(__name__)


class Project(Base, table=True):
    """Persistent project record.

    Table: projects
    """

    __tablename__ = "projects"

    slug: str = Field(primary_key=True, max_length=64)
    restricted: bool = Field(default=False, description="Whether downloads require a purchase")
    created_at: datetime = Field(default_factory=utc_now)
    details: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    @property
    def project_metadata(self) -> ProjectMetadata:
        """Validated ``details``; a malformed document reads as default metadata with no links."""
        try:
            return ProjectMetadata.model_validate(self.details or {})
        except ValidationError as e:
            logger.warning("Ignoring malformed metadata of project %s: %d validation errors", self.slug, e.error_count())
            return ProjectMetadata()

    def get_link_url(self, link_id: str) -> Optional[str]:
        """Get the URL of the project link with the given id, if configured."""
        return self.project_metadata.get_link_url(link_id)

    def __repr__(self) -> str:
        return f"Project(slug={self.slug}, restricted={self.restricted})"
