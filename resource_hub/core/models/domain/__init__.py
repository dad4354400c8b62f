"""Domain models shared by the persistence layer, stats providers and API."""

from .project import ProjectLink, ProjectMetadata
from .stats import ProjectStats

__all__ = [
    "ProjectLink",
    "ProjectMetadata",
    "ProjectStats",
]
