# =============================================================================
# Job Scrape Routes
# =============================================================================
"""
Endpoint that turns a job posting URL into structured job data.

The frontend pre-fills the interview setup form from the response. Errors
use an ``{"error": ...}`` body so the UI can tell a bad URL or unreachable
site (show an error) apart from a page that parsed but yielded nothing
(show the blank form for manual input).
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.config import Settings, get_settings
from src.models.job import JobScrapeRequest, JobScrapeResponse, ScrapeErrorResponse
from src.services.scraper import (
    FetchError,
    InvalidUrlError,
    JobPostingExtractor,
    NetworkError,
)


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Router Setup
# -----------------------------------------------------------------------------
router = APIRouter(prefix="/scrape-job", tags=["Scrape"])


# -----------------------------------------------------------------------------
# Error Messages
# -----------------------------------------------------------------------------
URL_REQUIRED_MESSAGE = "URL is required"
INVALID_URL_MESSAGE = "Invalid URL format"
INVALID_BODY_MESSAGE = "Invalid request body"
FETCH_FAILED_MESSAGE = "Failed to fetch URL: {status_text}"
SCRAPE_FAILED_MESSAGE = "Failed to scrape job posting. Please try manual input."


def error_response(status_code: int, message: str) -> JSONResponse:
    """
    Build an error response with the scrape endpoint's body shape.

    Args:
        status_code: HTTP status to return.
        message: Error message for the client.

    Returns:
        JSONResponse with an ``error`` field.
    """
    return JSONResponse(
        status_code=status_code,
        content=ScrapeErrorResponse(error=message).model_dump(),
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report request bodies that fail schema validation as ``error`` bodies.

    A ``url`` of the wrong type (number, list, object) is a malformed URL.
    Anything else, such as invalid JSON or a body that is not a JSON
    object, is reported as an invalid body.

    Args:
        request: The incoming request.
        exc: The validation error raised by FastAPI.

    Returns:
        400 JSONResponse with an ``error`` field.
    """
    locations = [tuple(error.get("loc", ())) for error in exc.errors()]
    logger.warning(f"Rejected request body for {request.url.path}: {locations}")

    if any(location[:2] == ("body", "url") for location in locations):
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_URL_MESSAGE)
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------
async def get_extractor(
    settings: Annotated[Settings, Depends(get_settings)]
) -> AsyncGenerator[JobPostingExtractor, None]:
    """
    Dependency providing a per-request job posting extractor.

    The extractor's HTTP client is closed once the response is sent.

    Args:
        settings: Application settings.

    Yields:
        JobPostingExtractor configured from settings.
    """
    async with JobPostingExtractor(
        user_agent=settings.scraper_user_agent,
        timeout=settings.scraper_timeout,
    ) as extractor:
        yield extractor


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
@router.post(
    "",
    response_model=JobScrapeResponse,
    responses={
        400: {"model": ScrapeErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": ScrapeErrorResponse, "description": "Scraping failed"},
    },
    summary="Scrape Job Posting",
    description=(
        "Fetch a job posting page and extract company, role, description "
        "and seniority. Upstream fetch failures are returned with the "
        "upstream status code."
    ),
)
async def scrape_job_posting(
    request: JobScrapeRequest,
    extractor: Annotated[JobPostingExtractor, Depends(get_extractor)],
):
    """
    Scrape a job posting from URL.

    Supports:
    - schema.org JobPosting structured data
    - iCIMS embedded job configuration
    - Known ATS platforms and job boards
    - Generic websites (with reduced accuracy)

    Args:
        request: Scrape request containing the URL to scrape.
        extractor: JobPostingExtractor from dependency injection.

    Returns:
        JobScrapeResponse on success, otherwise an error JSONResponse.
    """
    if not request.url:
        return error_response(status.HTTP_400_BAD_REQUEST, URL_REQUIRED_MESSAGE)

    try:
        job_data = await extractor.scrape_job(request.url)
    except InvalidUrlError as e:
        logger.warning(f"Invalid URL: {e}")
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_URL_MESSAGE)
    except FetchError as e:
        logger.error(f"Failed to fetch URL {request.url}: {e}")
        return error_response(
            e.status_code,
            FETCH_FAILED_MESSAGE.format(status_text=e.status_text),
        )
    except NetworkError as e:
        logger.error(f"Network error fetching {request.url}: {e}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, SCRAPE_FAILED_MESSAGE
        )
    except Exception as e:
        logger.error(f"Scraping error for {request.url}: {e}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, SCRAPE_FAILED_MESSAGE
        )

    return JobScrapeResponse(success=True, data=job_data)
