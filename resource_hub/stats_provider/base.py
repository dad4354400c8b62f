"""Base interface for marketplace stats providers.

This module defines the contract every marketplace integration implements:
given a project, fetch its usage statistics from one external service and
normalize them into a :class:`~resource_hub.core.models.domain.ProjectStats`.

Providers never raise. Every failure (no link configured, transport error or
invalid URL, non-success status, empty or malformed body, unexpected shape,
out of range values) is logged as a warning and reported as ``None``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from resource_hub.core.database.entities.projects import Project
from resource_hub.core.logging_config import get_logger
from resource_hub.core.models.domain import ProjectStats

from .http import CachingHttpClient

logger = get_logger(__name__)

ResponseType = TypeVar("ResponseType", bound=BaseModel)


class StatsProvider(ABC, Generic[ResponseType]):
    """Base interface for marketplace stats providers.

    Subclasses declare which project link they read (``link_id``), the
    endpoint template, and the pydantic model of the marketplace response,
    then implement the id extraction and the field mapping.
    """

    name: ClassVar[str]
    link_id: ClassVar[str]
    endpoint_url: ClassVar[str]
    response_model: ClassVar[Type[BaseModel]]

    def __init__(self, http: CachingHttpClient, *, enabled: bool = True) -> None:
        self.http = http
        self.enabled = enabled

    def is_enabled(self) -> bool:
        return self.enabled

    def get_stats(self, project: Project) -> Optional[ProjectStats]:
        """
        Fetch and normalize stats for a project.

        Args:
            project: The project whose marketplace link is looked up.

        Returns:
            ProjectStats, or None when the project has no usable link for this
            marketplace or the marketplace could not provide data.
        """
        link_url = project.get_link_url(self.link_id)
        if not link_url:
            return None
        resource_id = self.resolve_id(link_url)
        if not resource_id:
            logger.warning("Could not resolve %s resource id from link %s", self.name, link_url)
            return None
        payload = self.fetch(self.endpoint_url.format(id=resource_id))
        if payload is None:
            return None
        try:
            return self.to_stats(payload)
        except ValidationError as e:
            logger.warning(
                "Out of range stats from %s resource %s: %d validation errors", self.name, resource_id, e.error_count()
            )
            return None

    def fetch(self, url: str) -> Optional[ResponseType]:
        """GET a marketplace URL and decode it into ``response_model``."""
        try:
            response = self.http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Exception fetching %s resource from URL %s: %s", self.name, url, e)
            return None
        if not response.is_success:
            logger.warning("Got %d fetching %s resource from URL %s", response.status_code, self.name, url)
            return None
        if not response.content.strip():
            logger.warning("Empty response body from %s resource URL %s", self.name, url)
            return None
        try:
            data: Any = response.json()
        except ValueError as e:
            logger.warning("Malformed JSON from %s resource URL %s: %s", self.name, url, e)
            return None
        try:
            return self.response_model.model_validate(data)  # type: ignore[return-value]
        except ValidationError as e:
            logger.warning(
                "Unexpected response shape from %s resource URL %s: %d validation errors",
                self.name,
                url,
                e.error_count(),
            )
            return None

    @abstractmethod
    def resolve_id(self, link_url: str) -> Optional[str]:
        """
        Extract the marketplace identifier from the project's link URL.

        Returns:
            The identifier, or None when the URL does not contain one.
        """

    @abstractmethod
    def to_stats(self, payload: ResponseType) -> Optional[ProjectStats]:
        """
        Map a decoded marketplace response into ``ProjectStats``.

        Returns:
            ProjectStats, or None when the response reports a failure.
        """


def numeric_suffix_id(link_url: str) -> Optional[str]:
    """Resource id of ``.../name.<id>`` style URLs, as used by Polymart and SpigotMC.

    The id is the text after the last ``.`` with one trailing ``/`` removed,
    and must be numeric.
    """
    resource_id = link_url[link_url.rfind(".") + 1 :]
    if resource_id.endswith("/"):
        resource_id = resource_id[:-1]
    return resource_id if resource_id.isdigit() else None
