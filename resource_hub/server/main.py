"""
Main Application Entry Point.

This module initializes the FastAPI application, registers the exception
handlers and includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from resource_hub.core.database import init_db
from resource_hub.core.logging_config import get_logger, setup_logging

from .api.v1 import channels, distributions, health, projects, users, versions
from .core import constant
from .exception_handlers import setup_exception_handlers
from .services.deps import get_stats_service

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup and releases the marketplace HTTP
    clients on shutdown.
    """
    # Startup
    try:
        logger.info("Starting up Resource Hub Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Resource Hub Server...")
    if get_stats_service.cache_info().currsize:
        get_stats_service().close()
        get_stats_service.cache_clear()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Resource Hub Server API

    This API serves project, channel, distribution and version data for a plugin
    download site, tracks user purchases and entitlements, and aggregates
    download and rating statistics from Polymart, SpigotMC and Modrinth.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(projects.router, prefix=f"{constant.API_V1_STR}/projects")
app.include_router(distributions.router, prefix=f"{constant.API_V1_STR}/projects")
app.include_router(versions.router, prefix=f"{constant.API_V1_STR}/projects")
app.include_router(channels.router, prefix=f"{constant.API_V1_STR}/channels")
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users")


def run() -> None:
    """Run the server with uvicorn using the configured host and port."""
    import uvicorn

    from .core.config import settings

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
