# =============================================================================
# Health Check Routes
# =============================================================================
"""
Liveness and configuration checks for the scraping backend.

The service keeps no connections open between requests, so health is a
statement about the process and its scraper configuration rather than a
probe of downstream systems.
"""

from datetime import datetime, timezone
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from src import __version__
from src.config import Settings, get_settings
from src.services.scraper.strategies import get_strategies


# -----------------------------------------------------------------------------
# Router Setup
# -----------------------------------------------------------------------------
router = APIRouter(prefix="/health", tags=["Health"])

HealthState = Literal["healthy", "degraded", "unhealthy"]


# -----------------------------------------------------------------------------
# Response Models
# -----------------------------------------------------------------------------
class HealthStatus(BaseModel):
    """Process-level health returned to load balancers."""

    status: HealthState = Field(description="Overall health")
    timestamp: datetime = Field(description="Time of the check (UTC)")
    version: str = Field(description="Application version")
    environment: str = Field(description="Deployment environment")


class ApiComponent(BaseModel):
    """Status of the HTTP layer."""

    status: HealthState = "healthy"


class ScraperComponent(BaseModel):
    """
    Scraper configuration as seen by this process.

    Attributes:
        status: "degraded" when no extraction strategies are registered.
        timeout_seconds: Fetch timeout applied to job posting pages.
        strategies: Strategy names in the order they run.
    """

    status: HealthState
    timeout_seconds: float
    strategies: list[str]


class Components(BaseModel):
    """Per-component status for the detailed check."""

    api: ApiComponent
    scraper: ScraperComponent


class DetailedHealthStatus(HealthStatus):
    """Health plus the status of each component."""

    components: Components


def _scraper_component(settings: Settings) -> ScraperComponent:
    names = [strategy.name for strategy in get_strategies()]
    return ScraperComponent(
        status="healthy" if names else "degraded",
        timeout_seconds=settings.scraper_timeout,
        strategies=names,
    )


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
@router.get(
    "",
    response_model=HealthStatus,
    summary="Basic Health Check",
    description="Liveness check used by container orchestration."
)
async def health_check() -> HealthStatus:
    """Report that the process is up."""
    settings = get_settings()

    return HealthStatus(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.app_env
    )


@router.get(
    "/detailed",
    response_model=DetailedHealthStatus,
    summary="Detailed Health Check",
    description="Health plus the scraper timeout and strategy order."
)
async def detailed_health_check() -> DetailedHealthStatus:
    """
    Report component status.

    The overall status follows the scraper: a process without extraction
    strategies can answer requests but never extract anything.

    Returns:
        DetailedHealthStatus with API and scraper components.
    """
    settings = get_settings()
    scraper = _scraper_component(settings)

    return DetailedHealthStatus(
        status=scraper.status,
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.app_env,
        components=Components(api=ApiComponent(), scraper=scraper)
    )
