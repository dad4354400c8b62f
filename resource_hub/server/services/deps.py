"""
API Dependencies.

Provides the repository bundle (bound to the request's database session) and
the process-wide stats service to API endpoints.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.core.database import get_session
from resource_hub.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from resource_hub.server.core.config import settings
from resource_hub.stats_provider import StatsService, build_stats_service


async def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


@lru_cache(maxsize=1)
def get_stats_service() -> StatsService:
    """Singleton stats service, so the providers' response caches are shared between requests."""
    return build_stats_service(settings.stats)


ReposDep = Annotated[SqlRepoBundle, Depends(get_repos)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
