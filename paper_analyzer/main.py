"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, paper_analyzer.api, paper_analyzer.observability, paper_analyzer.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from paper_analyzer import __version__
from paper_analyzer.api.deps import get_service_cache
from paper_analyzer.api.routers import analyze_router, health_router
from paper_analyzer.api.routers.error_handling import VALIDATION_MESSAGE, error_response
from paper_analyzer.configs import get_settings
from paper_analyzer.observability.logger import configure_logging
from paper_analyzer.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and drops cached services on shutdown.
    Hosted model clients are built lazily on the first analysis request.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    if not settings.google_api_key:
        logger.warning("GOOGLE_API_KEY is not set; analysis requests will fail")

    yield

    get_service_cache().clear()
    logger.info("Application shutdown")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed analysis forms with the same body as missing fields."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    return error_response(status.HTTP_400_BAD_REQUEST, VALIDATION_MESSAGE)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Research Paper Analyzer API",
        description="Retrieval-augmented summaries of research papers against a research topic",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added last = first to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(analyze_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "paper_analyzer.main:app",
        host="localhost",
        port=8000,
        reload=get_settings().debug,
    )
