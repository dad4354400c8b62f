"""
Domain Exception Handler.

Renders typed resource hub errors (missing records, duplicate keys) as JSON
responses carrying the error's own HTTP status code.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from resource_hub.core.errors import NotFoundError, ResourceHubError
from resource_hub.core.logging_config import get_logger

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: ResourceHubError) -> JSONResponse:
    """
    Convert a ``ResourceHubError`` into a JSON error response.

    Not-found errors are expected traffic and logged at debug level; other
    domain errors are logged as warnings.

    Args:
        request: The HTTP request that raised the error
        exc: The domain error

    Returns:
        JSONResponse with ``detail`` and ``error_type``
    """
    log = logger.debug if isinstance(exc, NotFoundError) else logger.warning
    log(f"{type(exc).__name__} in {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": str(exc),
            "error_type": type(exc).__name__,
        },
    )
