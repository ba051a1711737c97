# =============================================================================
# Structured Data (JSON-LD) Strategy
# =============================================================================
"""
Read schema.org ``JobPosting`` data embedded as JSON-LD.

Structured data is vendor-agnostic and, when present, the most reliable
signal on the page, so this strategy always runs first.

Reference: https://schema.org/JobPosting
"""

import json
import logging
from typing import Any, Optional

from bs4 import BeautifulSoup

from src.services.scraper.sanitizer import clean_text
from src.services.scraper.strategies.base import BaseExtractionStrategy, ParsedJobData


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


JSON_LD_SELECTOR = 'script[type="application/ld+json"]'
JOB_POSTING_TYPE = "JobPosting"


def _is_job_posting(node: Any) -> bool:
    if not isinstance(node, dict):
        return False
    node_type = node.get("@type")
    if isinstance(node_type, list):
        return JOB_POSTING_TYPE in node_type
    return node_type == JOB_POSTING_TYPE


def find_job_posting(payload: Any) -> Optional[dict[str, Any]]:
    """
    Find the JobPosting node in a JSON-LD payload.

    Handles a single object, an array of objects, and an object whose
    ``@graph`` holds the nodes.

    Args:
        payload: Decoded JSON-LD document.

    Returns:
        The first JobPosting node, or None.
    """
    if isinstance(payload, list):
        nodes = payload
    elif isinstance(payload, dict):
        graph = payload.get("@graph")
        nodes = [payload] + (graph if isinstance(graph, list) else [])
    else:
        return None

    for node in nodes:
        if _is_job_posting(node):
            return node
    return None


class StructuredDataStrategy(BaseExtractionStrategy):
    """Fills fields from the first JSON-LD JobPosting on the page."""

    @property
    def name(self) -> str:
        return "structured_data"

    def should_run(self, record: ParsedJobData) -> bool:
        return True

    def apply(self, record: ParsedJobData, soup: BeautifulSoup) -> ParsedJobData:
        posting = self._extract_job_posting(soup)
        if posting is None:
            return record

        organization = posting.get("hiringOrganization")
        company = ""
        company_info = ""
        if isinstance(organization, dict):
            company = _as_text(organization.get("name"))
            company_info = _as_text(organization.get("description"))
        elif isinstance(organization, str):
            company = organization

        updates = {
            "role": _as_text(posting.get("title")),
            "company": company,
            "job_description": clean_text(_as_text(posting.get("description"))),
            "company_info": company_info,
        }
        # Only fill what is still missing
        updates = {
            field_name: value
            for field_name, value in updates.items()
            if not getattr(record, field_name)
        }
        return record.fill(self.name, **updates)

    def _extract_job_posting(self, soup: BeautifulSoup) -> Optional[dict[str, Any]]:
        """
        Return the first JobPosting node found in the page's JSON-LD blocks.

        Blocks that fail to decode are logged and skipped.
        """
        for script in soup.select(JSON_LD_SELECTOR):
            raw = (script.string or script.get_text() or "").strip()
            if not raw:
                continue

            try:
                payload = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.warning(f"Failed to parse JSON-LD block: {e}")
                continue

            posting = find_job_posting(payload)
            if posting is not None:
                return posting

        return None


def _as_text(value: Any) -> str:
    """Coerce a JSON-LD scalar to text; non-scalars become empty."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""
