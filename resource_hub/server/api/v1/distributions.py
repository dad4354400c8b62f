"""
API endpoints for project distributions.

Distributions are always addressed through their project; the channel-scoped
listing only returns distributions that have versions on that channel.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from resource_hub.core.database.entities import Distribution
from resource_hub.core.models.io.distributions import DistributionCreate, DistributionRead
from resource_hub.server.services.deps import ReposDep
from resource_hub.server.services.lookups import require_channel, require_project

router = APIRouter(tags=["distributions"])


@router.get(
    "/{project}/distributions",
    response_model=list[DistributionRead],
    summary="List Project Distributions",
    responses={
        200: {"description": "Distributions retrieved successfully"},
        404: {"description": "Project not found"},
    },
)
async def get_project_distributions(project: str, repos: ReposDep) -> list[DistributionRead]:
    """
    List every distribution of a project, in display order.

    - **project**: The project slug.
    """
    found = await require_project(repos, project)
    return [DistributionRead.model_validate(d) for d in await repos.distributions.list_by_project(found)]


@router.get(
    "/{project}/channels/{channel}/distributions",
    response_model=list[DistributionRead],
    summary="List Project Distributions by Channel",
    responses={
        200: {"description": "Distributions retrieved successfully"},
        404: {"description": "Project or channel not found"},
    },
)
async def get_project_distributions_by_channel(project: str, channel: str, repos: ReposDep) -> list[DistributionRead]:
    """
    List the distinct distributions that have at least one version on a channel.

    - **project**: The project slug.
    - **channel**: The channel name.
    """
    found_project = await require_project(repos, project)
    found_channel = await require_channel(repos, channel)
    distributions = await repos.distributions.list_by_project_and_channel(found_project, found_channel)
    return [DistributionRead.model_validate(d) for d in distributions]


@router.post(
    "/{project}/distributions",
    response_model=DistributionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Distribution",
    responses={
        201: {"description": "Distribution created successfully"},
        404: {"description": "Project not found"},
        409: {"description": "The project already has a distribution with this name"},
    },
)
async def create_distribution(project: str, distribution_in: DistributionCreate, repos: ReposDep) -> DistributionRead:
    found = await require_project(repos, project)
    distribution = Distribution(project_slug=found.slug, **distribution_in.model_dump())
    distribution = await repos.distributions.create(distribution)
    return DistributionRead.model_validate(distribution)
