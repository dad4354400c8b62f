"""
API endpoints for release channels.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from resource_hub.core.database.entities import Channel
from resource_hub.core.models.io.channels import ChannelCreate, ChannelRead
from resource_hub.server.services.deps import ReposDep
from resource_hub.server.services.lookups import require_channel

router = APIRouter(tags=["channels"])


@router.get(
    "",
    response_model=list[ChannelRead],
    summary="List Channels",
    response_description="A list of channel objects.",
)
async def list_channels(repos: ReposDep) -> list[ChannelRead]:
    return [ChannelRead.model_validate(c) for c in await repos.channels.list()]


@router.post(
    "",
    response_model=ChannelRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Channel",
    responses={
        201: {"description": "Channel created successfully"},
        409: {"description": "A channel with this name already exists"},
    },
)
async def create_channel(channel_in: ChannelCreate, repos: ReposDep) -> ChannelRead:
    channel = await repos.channels.create(Channel(name=channel_in.name))
    return ChannelRead.model_validate(channel)


@router.get(
    "/{name}",
    response_model=ChannelRead,
    summary="Get Channel",
    responses={
        200: {"description": "Channel found"},
        404: {"description": "Channel not found"},
    },
)
async def get_channel(name: str, repos: ReposDep) -> ChannelRead:
    return ChannelRead.model_validate(await require_channel(repos, name))
