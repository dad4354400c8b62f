"""
Database repositories.

One repository per table, all implementing the ``BaseRepository`` CRUD
contract, plus ``SqlRepoBundle`` for injecting them together.
"""

from .base import BaseRepository, QueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos_from_session
from .channels import ChannelRepository
from .distributions import DistributionRepository
from .projects import ProjectRepository
from .users import UserRepository
from .versions import VersionRepository

__all__ = [
    "BaseRepository",
    "ChannelRepository",
    "DistributionRepository",
    "ProjectRepository",
    "QueryBuilder",
    "SqlRepoBundle",
    "UserRepository",
    "VersionRepository",
    "build_sql_repos_from_session",
]
