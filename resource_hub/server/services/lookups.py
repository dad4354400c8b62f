"""
Domain lookups.

Fetch a record through the repository bundle or raise the matching typed
not-found error, which the exception handlers render as HTTP 404.
"""

from __future__ import annotations

from typing import Optional

from resource_hub.core.database.entities import Channel, Distribution, Project, User, Version
from resource_hub.core.database.repositories import SqlRepoBundle
from resource_hub.core.errors import (
    ChannelNotFoundError,
    DistributionNotFoundError,
    ProjectNotFoundError,
    UserNotFoundError,
    VersionNotFoundError,
)


async def require_project(repos: SqlRepoBundle, slug: str) -> Project:
    project = await repos.projects.get_by_id(slug)
    if project is None:
        raise ProjectNotFoundError(slug)
    return project


async def require_channel(repos: SqlRepoBundle, name: str) -> Channel:
    channel = await repos.channels.get_by_name(name)
    if channel is None:
        raise ChannelNotFoundError(name)
    return channel


async def require_distribution(repos: SqlRepoBundle, project: Project, name: str) -> Distribution:
    distribution = await repos.distributions.get_by_name(project, name)
    if distribution is None:
        raise DistributionNotFoundError(f"{project.slug}/{name}")
    return distribution


async def require_version(
    repos: SqlRepoBundle, project: Project, channel: Channel, name: Optional[str] = None
) -> Version:
    """Get a named version, or the latest one on the channel when ``name`` is None."""
    if name is None:
        version = await repos.versions.get_latest(project, channel)
    else:
        version = await repos.versions.get_by_name(project, channel, name)
    if version is None:
        raise VersionNotFoundError(f"{project.slug}/{channel.name}/{name or 'latest'}")
    return version


async def require_user(repos: SqlRepoBundle, user_id: str) -> User:
    user = await repos.users.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
