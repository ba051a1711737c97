# =============================================================================
# ATS Embedded Config Strategy
# =============================================================================
"""
Read the job object that iCIMS-style career sites embed as a global
``window.jobDescriptionConfig = {...};`` assignment in an inline script.

The embedded job carries the description split into several HTML
fragments (summary, description, qualifications, ...). They are stitched
back into a single description in a fixed order.
"""

import json
import logging
import re
from typing import Any, Optional

from bs4 import BeautifulSoup

from src.services.scraper.document import parse_fragment_text
from src.services.scraper.sanitizer import clean_text
from src.services.scraper.strategies.base import BaseExtractionStrategy, ParsedJobData


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
CONFIG_MARKER = "jobDescriptionConfig"
CONFIG_PATTERN = re.compile(
    r"window\.jobDescriptionConfig\s*=\s*(\{.*?\});", re.DOTALL
)

JOB_KEYS = ("job", "jobFormatted")
TITLE_KEYS = ("title", "job_title")
COMPANY_KEYS = ("hiring_organization", "clientName", "company_name")
SUMMARY_KEYS = ("summary", "job_summary")

# Appended after the main description, in this order
DESCRIPTION_SECTIONS = (
    ("qualifications", "Qualifications"),
    ("responsibilities", "Responsibilities"),
    ("requirements", "Requirements"),
)

SUMMARY_DEDUP_PREFIX = 50  # characters of the summary checked against the description


def _first_value(job: dict[str, Any], keys: tuple[str, ...]) -> str:
    """Return the first non-empty string value among the given keys."""
    for key in keys:
        value = job.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def compose_description(job: dict[str, Any]) -> str:
    """
    Build one description from the fragments of an embedded job object.

    The summary is prepended unless its opening text already appears in the
    main description; the qualification, responsibility and requirement
    sections follow under labelled headings.

    Args:
        job: The ``job`` object of the embedded config.

    Returns:
        Composed plain-text description, possibly empty.
    """
    description = ""

    main_html = _first_value(job, ("description",))
    if main_html:
        description += parse_fragment_text(main_html)

    summary_html = _first_value(job, SUMMARY_KEYS)
    if summary_html:
        summary = parse_fragment_text(summary_html)
        if summary and summary[:SUMMARY_DEDUP_PREFIX] not in description:
            description = f"{summary}\n\n{description}"

    for key, label in DESCRIPTION_SECTIONS:
        section_html = _first_value(job, (key,))
        if not section_html:
            continue
        section = parse_fragment_text(section_html)
        if section:
            description += f"\n\n{label}:\n{section}"

    return description.strip()


class AtsConfigStrategy(BaseExtractionStrategy):
    """Fills fields from an embedded ``jobDescriptionConfig`` job object."""

    @property
    def name(self) -> str:
        return "ats_config"

    def should_run(self, record: ParsedJobData) -> bool:
        return record.description_is_short

    def apply(self, record: ParsedJobData, soup: BeautifulSoup) -> ParsedJobData:
        script_body = self._find_config_script(soup)
        if script_body is None:
            return record

        job = self._parse_job(script_body)
        if job is None:
            return record

        updates: dict[str, str] = {"job_description": compose_description(job)}
        if not record.role:
            updates["role"] = clean_text(_first_value(job, TITLE_KEYS))
        if not record.company:
            updates["company"] = clean_text(_first_value(job, COMPANY_KEYS))

        return record.fill(self.name, **updates)

    def _find_config_script(self, soup: BeautifulSoup) -> Optional[str]:
        """Return the body of the first inline script mentioning the config."""
        for script in soup.find_all("script"):
            body = script.string or script.get_text()
            if body and CONFIG_MARKER in body:
                return body
        return None

    def _parse_job(self, script_body: str) -> Optional[dict[str, Any]]:
        """
        Decode the config assignment and return its job object.

        Decoding failures are logged and reported as no job found.
        """
        match = CONFIG_PATTERN.search(script_body)
        if not match:
            logger.debug(f"Found {CONFIG_MARKER} marker without an assignment")
            return None

        try:
            config = json.loads(match.group(1))
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse {CONFIG_MARKER}: {e}")
            return None

        if not isinstance(config, dict):
            return None

        for key in JOB_KEYS:
            job = config.get(key)
            if isinstance(job, dict) and job:
                return job
        return None
