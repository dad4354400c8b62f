"""
Marketplace stats providers.

Each provider fetches usage statistics for a project from one third-party
marketplace and normalizes them into ``ProjectStats``; ``StatsService``
merges the results of every enabled provider.
"""

from .base import StatsProvider
from .factory import PROVIDERS, build_stats_service
from .http import CachingHttpClient, ResponseCache
from .modrinth import ModrinthStatsProvider
from .polymart import PolymartStatsProvider
from .service import StatsService
from .spigot import SpigotStatsProvider

__all__ = [
    "PROVIDERS",
    "CachingHttpClient",
    "ModrinthStatsProvider",
    "PolymartStatsProvider",
    "ResponseCache",
    "SpigotStatsProvider",
    "StatsProvider",
    "StatsService",
    "build_stats_service",
]
