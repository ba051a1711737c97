# =============================================================================
# Job Posting Extractor Service
# =============================================================================
"""
Service for scraping a job posting URL into structured job data.

Fetches the page, then runs the extraction strategies in priority order,
each filling only the fields earlier strategies left empty. Fetch failures
are fatal; a strategy failing is logged and treated as finding nothing, so
the worst case is an all-empty result with the default seniority.

Usage:
    from src.services.scraper import JobPostingExtractor

    async with JobPostingExtractor() as extractor:
        job_data = await extractor.scrape_job("https://jobs.lever.co/acme/123")

    # Extraction alone, e.g. for HTML fetched elsewhere
    job_data = JobPostingExtractor().extract(html)
"""

import logging
from dataclasses import replace
from typing import Optional

from src.config import DEFAULT_SCRAPER_USER_AGENT
from src.models.job import JobData
from src.services.scraper.document import parse_document
from src.services.scraper.fetcher import DEFAULT_TIMEOUT, HtmlFetcher
from src.services.scraper.sanitizer import clean_text
from src.services.scraper.seniority import detect_seniority
from src.services.scraper.strategies import (
    BaseExtractionStrategy,
    ParsedJobData,
    get_strategies,
)
from src.services.scraper.strategies.base import TEXT_FIELDS


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Job Posting Extractor Class
# -----------------------------------------------------------------------------
class JobPostingExtractor:
    """
    Turns job posting pages into structured job data.

    Attributes:
        fetcher: HTML fetcher used to download pages.
        strategies: Extraction strategies in priority order.

    Example:
        async with JobPostingExtractor(timeout=10.0) as extractor:
            job = await extractor.scrape_job("https://boards.greenhouse.io/acme/jobs/1")
            print(f"{job.role} at {job.company} ({job.seniority})")
    """

    def __init__(
        self,
        fetcher: Optional[HtmlFetcher] = None,
        strategies: Optional[list[BaseExtractionStrategy]] = None,
        user_agent: str = DEFAULT_SCRAPER_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the extractor.

        Args:
            fetcher: Optional pre-configured fetcher.
            strategies: Optional strategy list; defaults to ``get_strategies()``.
            user_agent: User agent string used when creating a fetcher.
            timeout: Request timeout in seconds used when creating a fetcher.
        """
        self._fetcher = fetcher
        self._user_agent = user_agent
        self._timeout = timeout
        self.strategies = strategies if strategies is not None else get_strategies()

    @property
    def fetcher(self) -> HtmlFetcher:
        """HTML fetcher, created on first use."""
        if self._fetcher is None:
            self._fetcher = HtmlFetcher(user_agent=self._user_agent, timeout=self._timeout)
        return self._fetcher

    async def close(self) -> None:
        """
        Close the fetcher and its HTTP client.

        Should be called when the extractor is no longer needed.
        """
        if self._fetcher is not None:
            await self._fetcher.close()

    async def __aenter__(self) -> "JobPostingExtractor":
        """Support async context manager protocol."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up on context exit."""
        await self.close()

    # -------------------------------------------------------------------------
    # Public Methods
    # -------------------------------------------------------------------------
    async def scrape_job(self, url: str) -> JobData:
        """
        Scrape a job posting from the given URL.

        Args:
            url: Job posting URL to scrape.

        Returns:
            Extracted job data. Fields that could not be determined are empty.

        Raises:
            InvalidUrlError: If the URL is empty or malformed.
            FetchError: If the site responds with a non-2xx status.
            NetworkError: If the request fails or times out.
        """
        validated_url = self.fetcher.validate_url(url)
        logger.info(f"Scraping job posting: {validated_url}")

        html = await self.fetcher.fetch(validated_url)
        return self.extract(html)

    def extract(self, html: str) -> JobData:
        """
        Extract job data from an HTML document.

        Never raises for content problems: malformed markup parses to a
        partial tree and strategy failures are logged and skipped.

        Args:
            html: Raw HTML of a job posting page.

        Returns:
            Sanitized job data with seniority derived from the role.
        """
        soup = parse_document(html)
        record = ParsedJobData()

        # ---------------------------------------------------------------------
        # Run strategies in priority order
        # ---------------------------------------------------------------------
        for strategy in self.strategies:
            if not strategy.should_run(record):
                logger.debug(f"Skipping strategy: {strategy.name}")
                continue

            try:
                record = strategy.apply(record, soup)
            except Exception as e:
                logger.warning(f"Strategy '{strategy.name}' failed: {e}", exc_info=True)

        # ---------------------------------------------------------------------
        # Derive seniority and sanitize
        # ---------------------------------------------------------------------
        cleaned = {name: clean_text(getattr(record, name)) for name in TEXT_FIELDS}
        record = replace(record, seniority=detect_seniority(cleaned["role"]), **cleaned)
        job_data = record.to_job_data()

        logger.info(
            f"Extracted job: '{job_data.role}' at '{job_data.company}' "
            f"(seniority: {job_data.seniority}, description: "
            f"{len(job_data.job_description)} chars, sources: {record.filled_by})"
        )

        return job_data
