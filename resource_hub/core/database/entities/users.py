"""
User entity models.

This module contains the database entity for accounts. Users sign in through
Discord, so the primary key is the Discord snowflake and the avatar is a
Discord CDN hash.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now

CDN_URL = "https://cdn.discordapp.com"


class UserBase(Base):
    """Base fields for a user account."""

    name: str = Field(max_length=128, description="Account username, not necessarily unique")
    email: Optional[str] = Field(default=None, max_length=320, description="Account email address")
    avatar: Optional[str] = Field(default=None, max_length=128, description="Discord avatar hash")
    admin: Optional[bool] = Field(default=False, description="Whether the user is an administrator")


class User(UserBase, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=32)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        return bool(self.admin)

    @property
    def avatar_url(self) -> str:
        """Resolve the avatar to a CDN URL, falling back to a default avatar."""
        if self.avatar is None:
            default_index = (int(self.id.strip()) >> 22) % 6
            return f"{CDN_URL}/embed/avatars/{default_index}.png"
        return f"{CDN_URL}/avatars/{self.id}/{self.avatar}.png"

    def __repr__(self) -> str:
        return f"User(id={self.id}, name={self.name})"
