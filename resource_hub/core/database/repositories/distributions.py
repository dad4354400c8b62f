"""
Distribution repository implementation.

Besides plain CRUD this answers "which distributions of a project have
versions on a channel", used by the channel-scoped distribution listing.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..entities.channels import Channel
from ..entities.distributions import Distribution
from ..entities.projects import Project
from ..entities.versions import Version
from .base import BaseRepository, QueryBuilder


class DistributionRepository(BaseRepository[Distribution]):
    """Repository for distribution data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Distribution)

    async def create(self, distribution: Distribution) -> Distribution:
        return await self._save(
            distribution,
            conflict_message=f"Distribution already exists: {distribution.project_slug}/{distribution.name}",
        )

    async def get_by_id(self, distribution_id: str | int) -> Optional[Distribution]:
        stmt = select(Distribution).where(Distribution.id == int(distribution_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, project: Project, name: str) -> Optional[Distribution]:
        stmt = select(Distribution).where(
            (Distribution.project_slug == project.slug) & (Distribution.name == name)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, distribution: Distribution) -> Distribution:
        self.session.add(distribution)
        await self.session.commit()
        await self.session.refresh(distribution)
        return distribution

    async def delete(self, distribution_id: str | int) -> bool:
        distribution = await self.get_by_id(distribution_id)
        if distribution:
            await self.session.delete(distribution)
            await self.session.commit()
            return True
        return False

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Distribution]:
        stmt = select(Distribution).order_by(Distribution.sort_order, Distribution.name)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Distribution, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_project(self, project: Project) -> List[Distribution]:
        """Get every distribution of a project in display order."""
        return await self.list(filters={"project_slug": project.slug})

    async def list_by_project_and_channel(self, project: Project, channel: Channel) -> List[Distribution]:
        """Get the distinct distributions that have at least one version on a channel.

        Args:
            project: Owning project
            channel: Release channel

        Returns:
            Distributions in display order, each listed once
        """
        stmt = (
            select(Distribution)
            .join(Version, Version.distribution_id == Distribution.id)
            .where((Version.project_slug == project.slug) & (Version.channel_id == channel.id))
            .distinct()
            .order_by(Distribution.sort_order, Distribution.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
