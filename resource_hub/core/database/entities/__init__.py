"""
Database entity models.

This package contains all database entity models, one module per table:

- users: Accounts
- purchases: User to project entitlements (join table)
- projects: Distributable projects and their metadata
- channels: Release channels shared by all projects
- distributions: Build targets of a project
- versions: Published builds
"""

from .channels import Channel
from .distributions import Distribution, DistributionBase
from .projects import Project
from .purchases import Purchase
from .users import User, UserBase
from .versions import Version

__all__ = [
    "Channel",
    "Distribution",
    "DistributionBase",
    "Project",
    "Purchase",
    "User",
    "UserBase",
    "Version",
]
