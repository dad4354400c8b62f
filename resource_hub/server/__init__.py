"""HTTP server: FastAPI application, routers and exception handlers."""
