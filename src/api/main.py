# =============================================================================
# FastAPI Application Entry Point
# =============================================================================
"""
FastAPI application for the Interview Prep backend.

Exposes the job posting scrape endpoint used to pre-fill the interview
setup form, plus health checks.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src import __version__
from src.api.routes import health, scrape
from src.config import Settings, get_settings


API_TITLE = "Interview Prep API"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


configure_logging(get_settings())
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Lifespan Management
# -----------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Log startup and shutdown.

    Each scrape request opens and closes its own HTTP client, so there is
    nothing to create or dispose of here.
    """
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} v{__version__} ({settings.app_env}), "
        f"scraper timeout {settings.scraper_timeout}s"
    )

    yield

    logger.info(f"Stopped {settings.app_name}")


# -----------------------------------------------------------------------------
# Exception Handlers
# -----------------------------------------------------------------------------
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Turn exceptions that escaped a route into a 500 with an ``error`` body.

    Args:
        request: The incoming request.
        exc: The unhandled exception.

    Returns:
        JSON response; the exception text is included only in debug mode.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True
    )

    content = {"error": "An unexpected error occurred"}
    if get_settings().debug:
        content["details"] = str(exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content
    )


# -----------------------------------------------------------------------------
# Application Factory
# -----------------------------------------------------------------------------
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()
    docs_url = "/docs" if settings.debug else None

    app = FastAPI(
        title=API_TITLE,
        description=(
            "Extracts company, role, job description and seniority from job "
            "posting URLs to set up practice interviews."
        ),
        version=__version__,
        docs_url=docs_url,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # The frontend calls the API directly from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, scrape.request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health.router)
    app.include_router(scrape.router, prefix="/api")

    @app.get("/", tags=["Root"])
    async def service_info() -> dict:
        """Name, version and links for the running service."""
        return {
            "name": API_TITLE,
            "version": __version__,
            "status": "running",
            "docs": docs_url or "disabled",
            "health": "/health"
        }

    return app


# -----------------------------------------------------------------------------
# Application Instance
# -----------------------------------------------------------------------------
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
