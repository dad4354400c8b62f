"""
API endpoints for users, purchases and project entitlements.

Users are keyed by their Discord snowflake. Profiles are upserted on every
sign-in, so ``POST /users`` creates the account or refreshes the stored name,
email and avatar.
"""

from __future__ import annotations

from fastapi import APIRouter

from resource_hub.core.database.entities import User
from resource_hub.core.logging_config import get_logger
from resource_hub.core.models.io.users import (
    ProjectPermissionRead,
    PurchaseGrant,
    UserRead,
    UserUpsert,
)
from resource_hub.server.services.deps import ReposDep
from resource_hub.server.services.lookups import require_project, require_user

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    summary="Upsert User",
    description="Create a user or refresh an existing user's profile.",
    responses={
        200: {"description": "User created or updated"},
        422: {"description": "Invalid user id or profile"},
    },
)
async def upsert_user(user_in: UserUpsert, repos: ReposDep) -> UserRead:
    """
    Create or update a user profile.

    - **id**: Discord snowflake.
    - **name**: Account username.
    - **email**: Optional email address.
    - **avatar**: Optional Discord avatar hash; null falls back to a default avatar.
    - **admin**: Optional admin flag; left unchanged on existing users when omitted.
    """
    user = await repos.users.get_by_id(user_in.id)
    if user is None:
        user = await repos.users.create(
            User(
                id=user_in.id,
                name=user_in.name,
                email=user_in.email,
                avatar=user_in.avatar,
                admin=bool(user_in.admin),
            )
        )
        logger.info(f"Created user {user.id}")
    else:
        user.name = user_in.name
        user.email = user_in.email
        user.avatar = user_in.avatar
        if user_in.admin is not None:
            user.admin = user_in.admin
        user = await repos.users.update(user)
    return UserRead.from_entity(user, await repos.users.get_purchases(user))


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User",
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    },
)
async def get_user(user_id: str, repos: ReposDep) -> UserRead:
    """Get a user with the resolved avatar URL and purchased project slugs."""
    user = await require_user(repos, user_id)
    return UserRead.from_entity(user, await repos.users.get_purchases(user))


@router.post(
    "/{user_id}/purchases",
    response_model=UserRead,
    summary="Grant Purchases",
    description="Grant one or more projects to a user. Already owned projects are ignored.",
    responses={
        200: {"description": "Projects granted"},
        404: {"description": "User or project not found"},
    },
)
async def grant_purchases(user_id: str, grant: PurchaseGrant, repos: ReposDep) -> UserRead:
    user = await require_user(repos, user_id)
    projects = [await require_project(repos, slug) for slug in grant.projects]
    purchases = await repos.users.add_purchases(user, projects)
    logger.info(f"Granted {', '.join(p.slug for p in projects)} to user {user.id}")
    return UserRead.from_entity(user, purchases)


@router.get(
    "/{user_id}/projects/{slug}/permission",
    response_model=ProjectPermissionRead,
    summary="Check Project Permission",
    description="Whether the user may access the project's downloads.",
    responses={
        200: {"description": "Permission evaluated"},
        404: {"description": "User or project not found"},
    },
)
async def get_project_permission(user_id: str, slug: str, repos: ReposDep) -> ProjectPermissionRead:
    """
    Evaluate a user's entitlement to a project.

    Unrestricted projects are open to everyone. Restricted projects require an
    admin account or a purchase.
    """
    user = await require_user(repos, user_id)
    project = await require_project(repos, slug)
    allowed = await repos.users.has_project_permission(user, project)
    return ProjectPermissionRead(user_id=user.id, project=project.slug, allowed=allowed)
