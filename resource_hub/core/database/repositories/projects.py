"""
Project repository implementation.

Data access for projects. Deleting a project also removes the rows that
reference it (versions, distributions and purchases).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete as sa_delete
from sqlmodel import select

from ..entities.distributions import Distribution
from ..entities.projects import Project
from ..entities.purchases import Purchase
from ..entities.versions import Version
from .base import BaseRepository, QueryBuilder


class ProjectRepository(BaseRepository[Project]):
    """Repository for project data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Project)

    async def create(self, project: Project) -> Project:
        return await self._save(project, conflict_message=f"Project already exists: {project.slug}")

    async def get_by_id(self, slug: str | int) -> Optional[Project]:
        stmt = select(Project).where(Project.slug == str(slug))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.commit()
        await self.session.refresh(project)
        return project

    async def delete(self, slug: str | int) -> bool:
        project = await self.get_by_id(slug)
        if not project:
            return False
        await self.session.execute(sa_delete(Version).where(Version.project_slug == project.slug))
        await self.session.execute(sa_delete(Distribution).where(Distribution.project_slug == project.slug))
        await self.session.execute(sa_delete(Purchase).where(Purchase.project_slug == project.slug))
        await self.session.delete(project)
        await self.session.commit()
        return True

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        *,
        include_unlisted: bool = False,
    ) -> List[Project]:
        """List projects ordered by slug.

        Unlisted projects (``metadata.listed == false``) are dropped unless
        ``include_unlisted`` is set. The flag lives in the JSON document, so it
        is filtered after loading.
        """
        stmt = select(Project).order_by(Project.slug)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Project, filters)
        result = await self.session.execute(stmt)
        projects = list(result.scalars().all())
        if not include_unlisted:
            projects = [p for p in projects if p.project_metadata.listed]
        start = offset or 0
        end = start + limit if limit is not None else None
        return projects[start:end]
