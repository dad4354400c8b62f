"""
User repository implementation.

Covers account CRUD as well as purchases and the entitlement check that
decides whether a user may access a restricted project.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete as sa_delete
from sqlmodel import select

from ..entities.projects import Project
from ..entities.purchases import Purchase
from ..entities.users import User
from .base import BaseRepository, QueryBuilder


class UserRepository(BaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        return await self._save(user, conflict_message=f"User already exists: {user.id}")

    async def get_by_id(self, user_id: str | int) -> Optional[User]:
        stmt = select(User).where(User.id == str(user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, user: User) -> User:
        self.session.add(user)
        await self.session.commit()
        await self.session.refresh(user)
        return user

    async def delete(self, user_id: str | int) -> bool:
        user = await self.get_by_id(user_id)
        if not user:
            return False
        await self.session.execute(sa_delete(Purchase).where(Purchase.user_id == user.id))
        await self.session.delete(user)
        await self.session.commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[User]:
        stmt = select(User).order_by(User.created_at)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_purchases(self, user: User) -> List[str]:
        """Get the slugs of every project the user has purchased, sorted."""
        stmt = select(Purchase.project_slug).where(Purchase.user_id == user.id).order_by(Purchase.project_slug)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add_purchases(self, user: User, projects: Iterable[Project]) -> List[str]:
        """Grant projects to a user.

        Projects the user already owns are skipped, so granting is idempotent.

        Returns:
            The user's purchased slugs after the grant
        """
        owned = set(await self.get_purchases(user))
        for project in projects:
            if project.slug in owned:
                continue
            self.session.add(Purchase(user_id=user.id, project_slug=project.slug))
            owned.add(project.slug)
        await self.session.commit()
        return sorted(owned)

    async def has_purchased(self, user: User, project: Project) -> bool:
        stmt = select(Purchase).where((Purchase.user_id == user.id) & (Purchase.project_slug == project.slug))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def has_project_permission(self, user: User, project: Project) -> bool:
        """Whether the user may access the project.

        Unrestricted projects are open to everyone; restricted ones need an
        admin account or a purchase.
        """
        if not project.restricted or user.is_admin:
            return True
        return await self.has_purchased(user, project)
