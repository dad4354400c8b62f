"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in API endpoints and services.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .channels import ChannelRepository
from .distributions import DistributionRepository
from .projects import ProjectRepository
from .users import UserRepository
from .versions import VersionRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    projects: ProjectRepository
    channels: ChannelRepository
    distributions: DistributionRepository
    versions: VersionRepository
    users: UserRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        projects=ProjectRepository(session),
        channels=ChannelRepository(session),
        distributions=DistributionRepository(session),
        versions=VersionRepository(session),
        users=UserRepository(session),
    )
