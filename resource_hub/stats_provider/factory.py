"""Build the stats service from configuration."""

from __future__ import annotations

from typing import Dict, Optional, Type

from resource_hub.core.logging_config import get_logger
from resource_hub.server.core.config import StatsConfig

from .base import StatsProvider
from .http import CachingHttpClient
from .modrinth import ModrinthStatsProvider
from .polymart import PolymartStatsProvider
from .service import StatsService
from .spigot import SpigotStatsProvider

logger = get_logger(__name__)

PROVIDERS: Dict[str, Type[StatsProvider]] = {
    PolymartStatsProvider.name: PolymartStatsProvider,
    SpigotStatsProvider.name: SpigotStatsProvider,
    ModrinthStatsProvider.name: ModrinthStatsProvider,
}


def build_stats_service(config: Optional[StatsConfig] = None) -> StatsService:
    """
    Create a StatsService with one provider per known marketplace.

    Every known provider is constructed; those not listed in
    ``config.enabled_providers`` are disabled. Unknown names are ignored
    with a warning.

    Args:
        config: Stats configuration. Defaults are used when omitted.

    Returns:
        StatsService ready to aggregate project stats.
    """
    config = config or StatsConfig()
    enabled = {name.strip().lower() for name in config.enabled_providers}
    for unknown in sorted(enabled - PROVIDERS.keys()):
        logger.warning("Ignoring unknown stats provider in configuration: %s", unknown)

    providers = []
    for name, provider_cls in PROVIDERS.items():
        http = CachingHttpClient(
            name,
            ttl=config.cache_ttl_seconds,
            timeout=config.http_timeout,
            user_agent=config.user_agent,
        )
        providers.append(provider_cls(http, enabled=name in enabled))
    logger.debug("Stats providers enabled: %s", sorted(enabled & PROVIDERS.keys()))
    return StatsService(providers)
