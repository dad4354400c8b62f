"""
Version repository implementation.

All listings are newest first: ordered by ``timestamp`` and then by ``id``
so versions published within the same instant keep insertion order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..entities.channels import Channel
from ..entities.distributions import Distribution
from ..entities.projects import Project
from ..entities.versions import Version
from .base import BaseRepository, QueryBuilder


class VersionRepository(BaseRepository[Version]):
    """Repository for version data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Version)

    @staticmethod
    def _newest_first(stmt):
        return stmt.order_by(Version.timestamp.desc(), Version.id.desc())

    async def create(self, version: Version) -> Version:
        return await self._save(
            version, conflict_message=f"Version already exists: {version.project_slug}/{version.name}"
        )

    async def get_by_id(self, version_id: str | int) -> Optional[Version]:
        stmt = select(Version).where(Version.id == int(version_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, version: Version) -> Version:
        self.session.add(version)
        await self.session.commit()
        await self.session.refresh(version)
        return version

    async def delete(self, version_id: str | int) -> bool:
        version = await self.get_by_id(version_id)
        if version:
            await self.session.delete(version)
            await self.session.commit()
            return True
        return False

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Version]:
        stmt = self._newest_first(select(Version))
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Version, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_project(
        self,
        project: Project,
        channel: Optional[Channel] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Version]:
        """Get a page of a project's versions, optionally restricted to one channel."""
        filters: Dict[str, Any] = {"project_slug": project.slug}
        if channel is not None:
            filters["channel_id"] = channel.id
        return await self.list(limit=limit, offset=offset, filters=filters)

    async def list_by_project_and_channel(self, project: Project, channel: Channel) -> List[Version]:
        return await self.list_by_project(project, channel)

    async def get_latest(
        self, project: Project, channel: Channel, distribution: Optional[Distribution] = None
    ) -> Optional[Version]:
        """Get the newest version on a channel, optionally for one distribution.

        Returns:
            Version instance or None when nothing was published yet
        """
        filters: Dict[str, Any] = {"project_slug": project.slug, "channel_id": channel.id}
        if distribution is not None:
            filters["distribution_id"] = distribution.id
        versions = await self.list(limit=1, filters=filters)
        return versions[0] if versions else None

    async def get_by_name(self, project: Project, channel: Channel, name: str) -> Optional[Version]:
        """Get the newest version with the given name on a channel."""
        versions = await self.list(
            limit=1, filters={"project_slug": project.slug, "channel_id": channel.id, "name": name}
        )
        return versions[0] if versions else None
