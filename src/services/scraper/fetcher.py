# =============================================================================
# HTML Fetcher
# =============================================================================
"""
Fetch raw job posting HTML with a browser-like request signature.

A single GET is issued per call. There are no retries; failures are raised
as typed exceptions so the API layer can map them to responses.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from src.config import DEFAULT_SCRAPER_USER_AGENT


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
DEFAULT_TIMEOUT = 30.0  # seconds
ALLOWED_SCHEMES = ("http", "https")
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.5"


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------
class ScraperError(Exception):
    """Base exception for scraper errors."""

    pass


class InvalidUrlError(ScraperError):
    """URL is missing or not a well-formed absolute http(s) URL."""

    pass


class FetchError(ScraperError):
    """
    The job posting page answered with a non-success status.

    Attributes:
        status_code: HTTP status returned by the upstream site.
        status_text: Reason phrase returned by the upstream site.
    """

    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"HTTP {status_code}: {status_text}")


class NetworkError(ScraperError):
    """The request failed before a response was received."""

    pass


# -----------------------------------------------------------------------------
# HTML Fetcher Class
# -----------------------------------------------------------------------------
class HtmlFetcher:
    """
    Retrieves job posting pages over HTTP.

    Attributes:
        http_client: Async HTTP client used for requests.
        headers: Browser-like headers sent with every request.

    Example:
        async with HtmlFetcher() as fetcher:
            html = await fetcher.fetch("https://jobs.lever.co/acme/123")
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        user_agent: str = DEFAULT_SCRAPER_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            http_client: Optional pre-configured httpx client. The fetcher
                does not close clients it did not create.
            user_agent: User agent string for requests.
            timeout: Request timeout in seconds.
        """
        self.headers = build_browser_headers(user_agent)
        self._owned_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers=self.headers,
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the HTTP client if owned by this fetcher."""
        if self._owned_client and self.http_client:
            await self.http_client.aclose()
            logger.debug("HTTP client closed")

    async def __aenter__(self) -> "HtmlFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Public Methods
    # -------------------------------------------------------------------------
    def validate_url(self, url: Optional[str]) -> str:
        """
        Validate that the URL is an absolute http(s) URL.

        Args:
            url: URL to validate.

        Returns:
            The URL with surrounding whitespace removed.

        Raises:
            InvalidUrlError: If the URL is empty or malformed.
        """
        if not url or not url.strip():
            raise InvalidUrlError("URL cannot be empty")

        url = url.strip()
        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise InvalidUrlError(f"Invalid URL: {e}") from e

        if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.netloc:
            raise InvalidUrlError(f"Invalid URL format: {url}")

        return url

    async def fetch(self, url: str) -> str:
        """
        Fetch HTML content from a URL.

        Args:
            url: Absolute URL to fetch.

        Returns:
            Response body as text.

        Raises:
            InvalidUrlError: If the URL is malformed.
            FetchError: If the site responds with a non-2xx status.
            NetworkError: If the request fails or times out.
        """
        url = self.validate_url(url)

        try:
            response = await self.http_client.get(url, headers=self.headers)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Request failed: {e}") from e

        if not response.is_success:
            raise FetchError(response.status_code, response.reason_phrase)

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.text


def build_browser_headers(user_agent: str = DEFAULT_SCRAPER_USER_AGENT) -> dict[str, str]:
    """
    Build request headers resembling a desktop browser.

    Args:
        user_agent: User agent string to send.

    Returns:
        Header dictionary for httpx.
    """
    return {
        "User-Agent": user_agent,
        "Accept": DEFAULT_ACCEPT,
        "Accept-Language": DEFAULT_ACCEPT_LANGUAGE,
    }
