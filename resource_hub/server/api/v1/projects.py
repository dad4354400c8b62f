"""
API endpoints for projects.

Provides CRUD operations for projects and the aggregated marketplace
statistics endpoint.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.concurrency import run_in_threadpool

from resource_hub.core.database.entities import Project
from resource_hub.core.errors import ProjectNotFoundError
from resource_hub.core.logging_config import get_logger
from resource_hub.core.models.io.projects import (
    ProjectCreate,
    ProjectRead,
    ProjectStatsRead,
    ProjectUpdate,
)
from resource_hub.server.services.deps import ReposDep, StatsServiceDep
from resource_hub.server.services.lookups import require_project

logger = get_logger(__name__)

router = APIRouter(tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List Projects",
    description="Retrieve all listed projects, ordered by slug.",
    response_description="A list of project objects.",
)
async def list_projects(
    repos: ReposDep,
    include_unlisted: bool = False,
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> list[ProjectRead]:
    """
    List projects.

    - **include_unlisted**: Also return projects whose metadata marks them as unlisted.
    - **limit**: Optional page size.
    - **offset**: Number of projects to skip.
    """
    projects = await repos.projects.list(limit=limit, offset=offset, include_unlisted=include_unlisted)
    logger.debug(f"Retrieved {len(projects)} projects (include_unlisted={include_unlisted})")
    return [ProjectRead.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Project",
    responses={
        201: {"description": "Project created successfully"},
        409: {"description": "A project with this slug already exists"},
    },
)
async def create_project(project_in: ProjectCreate, repos: ReposDep) -> ProjectRead:
    """
    Create a new project.

    - **slug**: Unique, URL-safe project identifier.
    - **restricted**: Whether downloads require a purchase.
    - **metadata**: Display name, tagline, listing flags and marketplace links.
    """
    project = Project(
        slug=project_in.slug,
        restricted=project_in.restricted,
        details=project_in.metadata.model_dump(mode="json"),
    )
    project = await repos.projects.create(project)
    logger.info(f"Created project {project.slug}")
    return ProjectRead.model_validate(project)


@router.get(
    "/{slug}",
    response_model=ProjectRead,
    summary="Get Project",
    responses={
        200: {"description": "Project found"},
        404: {"description": "Project not found"},
    },
)
async def get_project(slug: str, repos: ReposDep) -> ProjectRead:
    """Get a project by its slug."""
    return ProjectRead.model_validate(await require_project(repos, slug))


@router.patch(
    "/{slug}",
    response_model=ProjectRead,
    summary="Update Project",
    description="Partially update a project. Only provided fields are updated; metadata is replaced as a whole.",
    responses={
        200: {"description": "Project updated successfully"},
        404: {"description": "Project not found"},
    },
)
async def update_project(slug: str, project_update: ProjectUpdate, repos: ReposDep) -> ProjectRead:
    project = await require_project(repos, slug)
    if project_update.restricted is not None:
        project.restricted = project_update.restricted
    if project_update.metadata is not None:
        project.details = project_update.metadata.model_dump(mode="json")
    project = await repos.projects.update(project)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{slug}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Project",
    description="Permanently delete a project together with its distributions, versions and purchases.",
    responses={
        204: {"description": "Project deleted successfully"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(slug: str, repos: ReposDep) -> None:
    if not await repos.projects.delete(slug):
        raise ProjectNotFoundError(slug)
    logger.info(f"Deleted project {slug}")


@router.get(
    "/{slug}/stats",
    response_model=ProjectStatsRead,
    summary="Get Project Stats",
    description="Aggregate download and rating statistics from every configured marketplace.",
    response_description="Combined stats, or null stats when no marketplace had data.",
    responses={
        200: {"description": "Stats aggregated"},
        404: {"description": "Project not found"},
    },
)
async def get_project_stats(slug: str, repos: ReposDep, stats_service: StatsServiceDep) -> ProjectStatsRead:
    """
    Get aggregated marketplace statistics.

    Marketplace requests are blocking and run in the threadpool. Marketplaces
    that fail or have no data for the project are left out of the result.

    - **slug**: The project to fetch stats for.
    """
    project = await require_project(repos, slug)
    stats = await run_in_threadpool(stats_service.get_stats, project)
    return ProjectStatsRead(project=project.slug, stats=stats)
