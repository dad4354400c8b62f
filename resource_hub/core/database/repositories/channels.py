"""
Channel repository implementation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..entities.channels import Channel
from .base import BaseRepository, QueryBuilder


class ChannelRepository(BaseRepository[Channel]):
    """Repository for release channel data access operations using SQLModel."""

    def __init__(self, session) -> None:
        super().__init__(session, Channel)

    async def create(self, channel: Channel) -> Channel:
        return await self._save(channel, conflict_message=f"Channel already exists: {channel.name}")

    async def get_by_id(self, channel_id: str | int) -> Optional[Channel]:
        stmt = select(Channel).where(Channel.id == int(channel_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Channel]:
        """Get a channel by its unique name.

        Args:
            name: Channel name (e.g., 'release')

        Returns:
            Channel instance or None
        """
        stmt = select(Channel).where(Channel.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, channel: Channel) -> Channel:
        self.session.add(channel)
        await self.session.commit()
        await self.session.refresh(channel)
        return channel

    async def delete(self, channel_id: str | int) -> bool:
        channel = await self.get_by_id(channel_id)
        if channel:
            await self.session.delete(channel)
            await self.session.commit()
            return True
        return False

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[Channel]:
        stmt = select(Channel).order_by(Channel.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Channel, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
