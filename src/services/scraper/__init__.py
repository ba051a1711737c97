# =============================================================================
# Job Scraper Service Package
# =============================================================================
"""
Job posting scraper for pre-filling interview setup from a posting URL.

Extracts company, role, description and seniority from pages hosted on:
- Sites embedding schema.org JobPosting JSON-LD
- iCIMS-style sites embedding a jobDescriptionConfig object
- Known ATS platforms and job boards (iCIMS, Greenhouse, Lever, Workday,
  LinkedIn, Indeed, SmartRecruiters, BambooHR)
- Generic websites (heuristic scoring, then meta tags)

Usage:
    from src.services.scraper import JobPostingExtractor

    async with JobPostingExtractor() as extractor:
        job_data = await extractor.scrape_job("https://jobs.lever.co/acme/123")
"""

from src.services.scraper.fetcher import (
    FetchError,
    HtmlFetcher,
    InvalidUrlError,
    NetworkError,
    ScraperError,
)
from src.services.scraper.sanitizer import clean_text
from src.services.scraper.seniority import detect_seniority
from src.services.scraper.service import JobPostingExtractor

__all__ = [
    "FetchError",
    "HtmlFetcher",
    "InvalidUrlError",
    "JobPostingExtractor",
    "NetworkError",
    "ScraperError",
    "clean_text",
    "detect_seniority",
]
