"""
User I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from resource_hub.core.database.entities.users import User


class UserRead(BaseModel):
    """Schema for reading a user from the API, with resolved avatar and purchases."""

    id: str
    created_at: datetime
    name: str
    email: Optional[str] = None
    avatar: str = Field(description="Avatar URL")
    admin: bool
    purchases: List[str] = Field(default_factory=list, description="Slugs of purchased projects")

    @classmethod
    def from_entity(cls, user: User, purchases: List[str]) -> UserRead:
        return cls(
            id=user.id,
            created_at=user.created_at,
            name=user.name,
            email=user.email,
            avatar=user.avatar_url,
            admin=user.is_admin,
            purchases=purchases,
        )


class UserUpsert(BaseModel):
    """Schema for creating or refreshing a user profile."""

    id: str = Field(pattern=r"^\d{1,20}$", description="Discord snowflake id")
    name: str = Field(min_length=1, max_length=128)
    email: Optional[str] = None
    avatar: Optional[str] = None
    admin: Optional[bool] = None


class PurchaseGrant(BaseModel):
    """Schema for granting projects to a user."""

    projects: List[str] = Field(min_length=1, description="Slugs of projects to grant")


class ProjectPermissionRead(BaseModel):
    user_id: str
    project: str
    allowed: bool
