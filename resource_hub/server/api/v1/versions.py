"""
API endpoints for project versions.

Versions are listed newest first. Publishing a version requires the project,
the channel and the named distribution to exist.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from resource_hub.core.database.entities import Version
from resource_hub.core.errors import VersionNotFoundError
from resource_hub.core.logging_config import get_logger
from resource_hub.core.models.io.versions import VersionCreate, VersionRead
from resource_hub.server.services.deps import ReposDep
from resource_hub.server.services.lookups import (
    require_channel,
    require_distribution,
    require_project,
    require_version,
)

logger = get_logger(__name__)

router = APIRouter(tags=["versions"])


@router.get(
    "/{project}/versions",
    response_model=list[VersionRead],
    summary="List Project Versions",
    description="Retrieve a page of a project's versions, newest first, optionally on one channel.",
    responses={
        200: {"description": "Versions retrieved successfully"},
        404: {"description": "Project or channel not found"},
    },
)
async def list_project_versions(
    project: str,
    repos: ReposDep,
    channel: Optional[str] = None,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
) -> list[VersionRead]:
    """
    List project versions.

    - **channel**: Optional channel name to restrict the listing to.
    - **limit**: Page size (1-500).
    - **offset**: Number of versions to skip.
    """
    found_project = await require_project(repos, project)
    found_channel = await require_channel(repos, channel) if channel else None
    versions = await repos.versions.list_by_project(found_project, found_channel, limit=limit, offset=offset)
    return [VersionRead.model_validate(v) for v in versions]


@router.get(
    "/{project}/channels/{channel}/versions",
    response_model=list[VersionRead],
    summary="List Project Versions by Channel",
    responses={
        200: {"description": "Versions retrieved successfully"},
        404: {"description": "Project or channel not found"},
    },
)
async def list_project_channel_versions(project: str, channel: str, repos: ReposDep) -> list[VersionRead]:
    found_project = await require_project(repos, project)
    found_channel = await require_channel(repos, channel)
    versions = await repos.versions.list_by_project_and_channel(found_project, found_channel)
    return [VersionRead.model_validate(v) for v in versions]


@router.get(
    "/{project}/channels/{channel}/versions/latest",
    response_model=VersionRead,
    summary="Get Latest Version",
    description="Retrieve the newest version on a channel, optionally for one distribution.",
    responses={
        200: {"description": "Latest version found"},
        404: {"description": "Project, channel, distribution or version not found"},
    },
)
async def get_latest_version(
    project: str,
    channel: str,
    repos: ReposDep,
    distribution: Optional[str] = None,
) -> VersionRead:
    """
    Get the latest version.

    - **distribution**: Optional distribution name; when omitted the newest version of any distribution is returned.
    """
    found_project = await require_project(repos, project)
    found_channel = await require_channel(repos, channel)
    if distribution is None:
        return VersionRead.model_validate(await require_version(repos, found_project, found_channel))
    found_distribution = await require_distribution(repos, found_project, distribution)
    version = await repos.versions.get_latest(found_project, found_channel, found_distribution)
    if version is None:
        raise VersionNotFoundError(f"{found_project.slug}/{found_channel.name}/{distribution}/latest")
    return VersionRead.model_validate(version)


@router.get(
    "/{project}/channels/{channel}/versions/{name}",
    response_model=VersionRead,
    summary="Get Version",
    responses={
        200: {"description": "Version found"},
        404: {"description": "Project, channel or version not found"},
    },
)
async def get_version(project: str, channel: str, name: str, repos: ReposDep) -> VersionRead:
    found_project = await require_project(repos, project)
    found_channel = await require_channel(repos, channel)
    return VersionRead.model_validate(await require_version(repos, found_project, found_channel, name))


@router.post(
    "/{project}/channels/{channel}/versions",
    response_model=VersionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Publish Version",
    responses={
        201: {"description": "Version published successfully"},
        404: {"description": "Project, channel or distribution not found"},
        409: {"description": "This version already exists on the channel for the distribution"},
    },
)
async def create_version(project: str, channel: str, version_in: VersionCreate, repos: ReposDep) -> VersionRead:
    """
    Publish a new version.

    - **name**: The version string.
    - **distribution**: Name of an existing distribution of the project.
    - **changelog**: Optional release notes.
    - **timestamp**: Optional release time; defaults to now.
    """
    found_project = await require_project(repos, project)
    found_channel = await require_channel(repos, channel)
    found_distribution = await require_distribution(repos, found_project, version_in.distribution)
    version = Version(
        name=version_in.name,
        changelog=version_in.changelog,
        project_slug=found_project.slug,
        channel_id=found_channel.id,
        distribution_id=found_distribution.id,
    )
    if version_in.timestamp is not None:
        version.timestamp = version_in.timestamp
    version = await repos.versions.create(version)
    logger.info(f"Published {found_project.slug} {version.name} on {found_channel.name} ({found_distribution.name})")
    return VersionRead.model_validate(version)
