"""Domain error types for the resource hub.

Purpose:
- Provide typed exceptions raised by repositories and lookups when a record
  is missing or would violate a uniqueness constraint.
- Carry enough context (entity kind, identifier) for the HTTP layer to
  render a useful error body.

Usage:
- Catch `NotFoundError` for any missing record, or a concrete subclass such
  as `ProjectNotFoundError` when only one kind matters.
- `ConflictError` is raised when a create would duplicate an existing row.
"""

from __future__ import annotations

from typing import Any, Optional


class ResourceHubError(Exception):
    """Base error for resource hub failures.

    Args:
        message: Human-readable error description.
        status_code: HTTP status code the error should surface as.
    """

    status_code: int = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ResourceHubError):
    """Raised when a looked-up record does not exist (HTTP 404)."""

    status_code = 404
    entity = "resource"

    def __init__(self, identifier: Any) -> None:
        super().__init__(f"{self.entity.capitalize()} not found: {identifier}")
        self.identifier = identifier


class ProjectNotFoundError(NotFoundError):
    entity = "project"


class ChannelNotFoundError(NotFoundError):
    entity = "channel"


class DistributionNotFoundError(NotFoundError):
    entity = "distribution"


class VersionNotFoundError(NotFoundError):
    entity = "version"


class UserNotFoundError(NotFoundError):
    entity = "user"


class ConflictError(ResourceHubError):
    """Raised when a record with the same unique key already exists (HTTP 409)."""

    status_code = 409
