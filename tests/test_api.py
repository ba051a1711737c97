# =============================================================================
# API Endpoint Tests
# =============================================================================
"""
Tests for the scrape and health endpoints.

Requests go through the ASGI app in-process. The upstream job site is
replaced by an httpx MockTransport via a dependency override.
"""

from typing import Any, Callable

import httpx
import pytest
from fastapi import FastAPI

from src.api.main import create_app
from src.api.routes.scrape import get_extractor
from src.models.job import JobData
from src.services.scraper import HtmlFetcher, JobPostingExtractor


SCRAPE_URL = "/api/scrape-job"
JOB_URL = "https://boards.greenhouse.io/acme/jobs/123"
GENERIC_ERROR = "Failed to scrape job posting. Please try manual input."

Handler = Callable[[httpx.Request], httpx.Response]


class BrokenExtractor(JobPostingExtractor):
    """Extractor whose extraction step fails unexpectedly."""

    def extract(self, html: str) -> JobData:
        raise ValueError("unexpected document shape")


# -----------------------------------------------------------------------------
# Fixtures and Helpers
# -----------------------------------------------------------------------------
@pytest.fixture
def app() -> FastAPI:
    """
    Create a fresh application instance.

    Yields:
        FastAPI application with dependency overrides cleared afterwards.
    """
    application = create_app()
    yield application
    application.dependency_overrides.clear()


def serve_upstream(
    app: FastAPI,
    handler: Handler,
    extractor_class: type[JobPostingExtractor] = JobPostingExtractor,
) -> None:
    """
    Route the scrape endpoint's outgoing requests to a mock handler.

    Args:
        app: Application to configure.
        handler: MockTransport handler standing in for the job site.
        extractor_class: Extractor class to inject.
    """

    async def _extractor():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            yield extractor_class(fetcher=HtmlFetcher(http_client=client))

    app.dependency_overrides[get_extractor] = _extractor


async def call(app: FastAPI, method: str, path: str, **kwargs) -> httpx.Response:
    """Send a request to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, path, **kwargs)


# -----------------------------------------------------------------------------
# Scrape Endpoint Tests
# -----------------------------------------------------------------------------
class TestScrapeEndpoint:
    """Tests for POST /api/scrape-job."""

    @pytest.mark.asyncio
    async def test_success(self, app, build_page, html_handler) -> None:
        """Test a successful scrape with camelCase response keys."""
        html = build_page(head="<title>Senior Backend Engineer | Acme Corp</title>")
        serve_upstream(app, html_handler(html))

        response = await call(app, "POST", SCRAPE_URL, json={"url": JOB_URL})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {
                "company": "Acme Corp",
                "role": "Senior Backend Engineer",
                "jobDescription": "",
                "companyInfo": "",
                "seniority": "senior",
            },
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"url": ""}, {"url": None}])
    async def test_missing_url(self, app, html_handler, payload) -> None:
        """Test that a missing or empty URL is rejected."""
        serve_upstream(app, html_handler("<html></html>"))

        response = await call(app, "POST", SCRAPE_URL, json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "url",
        [
            "not-a-url",
            "ftp://example.com/job",
            "   ",
            123,
            True,
            [JOB_URL],
            {"href": JOB_URL},
        ],
    )
    async def test_invalid_url(self, app, html_handler, url: Any) -> None:
        """Test that malformed URLs are rejected."""
        serve_upstream(app, html_handler("<html></html>"))

        response = await call(app, "POST", SCRAPE_URL, json={"url": url})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid URL format"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        ["not json", f'["{JOB_URL}"]', '"just a string"'],
    )
    async def test_invalid_body(self, app, html_handler, content: str) -> None:
        """Test that a body which is not a JSON object keeps the error shape."""
        serve_upstream(app, html_handler("<html></html>"))

        response = await call(
            app,
            "POST",
            SCRAPE_URL,
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, status_text",
        [(404, "Not Found"), (403, "Forbidden"), (503, "Service Unavailable")],
    )
    async def test_upstream_error_status(
        self, app, html_handler, status_code: int, status_text: str
    ) -> None:
        """Test that upstream failures keep their status code."""
        serve_upstream(app, html_handler("error page", status_code=status_code))

        response = await call(app, "POST", SCRAPE_URL, json={"url": JOB_URL})

        assert response.status_code == status_code
        assert response.json() == {"error": f"Failed to fetch URL: {status_text}"}

    @pytest.mark.asyncio
    async def test_network_error(self, app) -> None:
        """Test that an unreachable site gives the generic error."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("name resolution failed", request=request)

        serve_upstream(app, handler)

        response = await call(app, "POST", SCRAPE_URL, json={"url": JOB_URL})

        assert response.status_code == 500
        assert response.json() == {"error": GENERIC_ERROR}

    @pytest.mark.asyncio
    async def test_unexpected_error(self, app, html_handler) -> None:
        """Test that an unexpected failure gives the generic error."""
        serve_upstream(app, html_handler("<html></html>"), extractor_class=BrokenExtractor)

        response = await call(app, "POST", SCRAPE_URL, json={"url": JOB_URL})

        assert response.status_code == 500
        assert response.json() == {"error": GENERIC_ERROR}

    @pytest.mark.asyncio
    async def test_empty_page_is_success(self, app, html_handler) -> None:
        """Test that a page yielding nothing is still a successful scrape."""
        serve_upstream(app, html_handler("<html><body></body></html>"))

        response = await call(app, "POST", SCRAPE_URL, json={"url": JOB_URL})

        assert response.status_code == 200
        assert response.json()["data"] == {
            "company": "",
            "role": "",
            "jobDescription": "",
            "companyInfo": "",
            "seniority": "junior",
        }

    @pytest.mark.asyncio
    async def test_cors_preflight(self, app) -> None:
        """Test that the frontend origin may call the endpoint."""
        response = await call(
            app,
            "OPTIONS",
            SCRAPE_URL,
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


# -----------------------------------------------------------------------------
# Health Endpoint Tests
# -----------------------------------------------------------------------------
class TestHealthEndpoints:
    """Tests for the health and root endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, app) -> None:
        """Test the basic health check."""
        response = await call(app, "GET", "/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_detailed_health(self, app) -> None:
        """Test that the detailed check lists the strategies in order."""
        response = await call(app, "GET", "/health/detailed")

        scraper = response.json()["components"]["scraper"]
        assert response.status_code == 200
        assert scraper["strategies"] == [
            "structured_data",
            "ats_config",
            "ats_patterns",
            "heuristics",
            "meta_tags",
        ]
        assert scraper["timeout_seconds"] > 0

    @pytest.mark.asyncio
    async def test_root(self, app) -> None:
        """Test the root endpoint."""
        response = await call(app, "GET", "/")

        assert response.status_code == 200
        assert response.json()["health"] == "/health"
