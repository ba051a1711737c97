# =============================================================================
# Models Package
# =============================================================================
"""
Pydantic models and API schemas for the Interview Prep backend.

This package contains Pydantic models used for:
- API request/response validation
- Data serialization
- OpenAPI documentation generation

Note: The internal record threaded through the extraction strategies is
in src/services/scraper/strategies/base.py

Usage:
    from src.models import JobData, JobScrapeRequest
    from src.models.job import JobScrapeResponse, ScrapeErrorResponse
"""

from src.models.job import (
    JobData,
    JobScrapeRequest,
    JobScrapeResponse,
    ScrapeErrorResponse,
    Seniority,
)

__all__ = [
    "JobData",
    "JobScrapeRequest",
    "JobScrapeResponse",
    "ScrapeErrorResponse",
    "Seniority",
]
