"""
Release channel entity models.

Channels (``release``, ``beta``, ``alpha``...) are shared by every project.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Channel(Base, table=True):
    """Persistent release channel.

    Table: channels
    """

    __tablename__ = "channels"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=64, unique=True, index=True)

    def __repr__(self) -> str:
        return f"Channel(id={self.id}, name={self.name})"
