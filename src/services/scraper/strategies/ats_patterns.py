# =============================================================================
# ATS Selector Pattern Strategy
# =============================================================================
"""
Match the page against CSS selectors known from specific ATS platforms and
job boards.

Patterns are tried in order. A pattern that fills at least two fields on
its own attempt is taken as the page's platform and no further patterns
are tried.
"""

import logging
from typing import NamedTuple

from bs4 import BeautifulSoup

from src.services.scraper.document import clone_without, select_first, text_of
from src.services.scraper.strategies.base import BaseExtractionStrategy, ParsedJobData


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


class AtsPattern(NamedTuple):
    """CSS selectors for the company, title and description of one platform."""

    platform: str
    company: str
    title: str
    description: str


# -----------------------------------------------------------------------------
# Pattern Table
# -----------------------------------------------------------------------------
ATS_PATTERNS: tuple[AtsPattern, ...] = (
    AtsPattern(
        platform="icims",
        company=".iCIMS_Header, .iCIMS_Branding",
        title="h1.iCIMS_InfoMsg_Job",
        description=".iCIMS_InfoMsg, #iCIMS_JobDescription",
    ),
    AtsPattern(
        platform="greenhouse",
        company=".company-name",
        title=".app-title",
        description="#content .content",
    ),
    AtsPattern(
        platform="lever",
        company=".main-header-text a",
        title=".posting-headline h2",
        description=".section.page-centered",
    ),
    AtsPattern(
        platform="workday",
        company='[data-automation-id="jobPostingCompany"]',
        title='h2[data-automation-id="jobPostingHeader"]',
        description='[data-automation-id="jobPostingDescription"]',
    ),
    AtsPattern(
        platform="linkedin",
        company=".topcard__org-name-link, .top-card-layout__card .topcard__flavor--black-link",
        title=".topcard__title, .top-card-layout__title",
        description=".show-more-less-html__markup, .description__text",
    ),
    AtsPattern(
        platform="indeed",
        company="[data-company-name], .jobsearch-InlineCompanyRating-companyHeader a",
        title=".jobsearch-JobInfoHeader-title, h1.jobsearch-JobInfoHeader-title",
        description="#jobDescriptionText",
    ),
    AtsPattern(
        platform="smartrecruiters",
        company=".header-company-name",
        title="h1.job-title",
        description=".job-description",
    ),
    AtsPattern(
        platform="bamboohr",
        company=".company-header__name",
        title="h1.BambooHR-ATS-Job-Title",
        description=".BambooHR-ATS-Description",
    ),
)

DESCRIPTION_NOISE_SELECTOR = "script, style, nav, header, footer, .apply-button, .social-share"
MIN_PATTERN_DESCRIPTION_LENGTH = 100  # characters; must be exceeded
MIN_MATCHES_TO_STOP = 2


class AtsPatternStrategy(BaseExtractionStrategy):
    """Fills fields from the first ATS selector pattern that fits the page."""

    def __init__(self, patterns: tuple[AtsPattern, ...] = ATS_PATTERNS) -> None:
        self.patterns = patterns

    @property
    def name(self) -> str:
        return "ats_patterns"

    def should_run(self, record: ParsedJobData) -> bool:
        return record.description_is_short

    def apply(self, record: ParsedJobData, soup: BeautifulSoup) -> ParsedJobData:
        for pattern in self.patterns:
            record, match_count = self._apply_pattern(pattern, record, soup)

            if match_count >= MIN_MATCHES_TO_STOP:
                logger.info(
                    f"Matched ATS pattern '{pattern.platform}' ({match_count} fields)"
                )
                break

        return record

    def _apply_pattern(
        self,
        pattern: AtsPattern,
        record: ParsedJobData,
        soup: BeautifulSoup,
    ) -> tuple[ParsedJobData, int]:
        """
        Try one platform's selectors against the document.

        Args:
            pattern: Selectors to try.
            record: The record built so far.
            soup: Parsed document.

        Returns:
            Tuple of (updated record, number of fields this pattern filled).
        """
        updates: dict[str, str] = {}

        if not record.company:
            updates["company"] = text_of(select_first(soup, pattern.company))

        if not record.role:
            updates["role"] = text_of(select_first(soup, pattern.title))

        if record.description_is_short:
            element = select_first(soup, pattern.description)
            if element is not None:
                text = text_of(clone_without(element, DESCRIPTION_NOISE_SELECTOR))
                if len(text) > MIN_PATTERN_DESCRIPTION_LENGTH:
                    updates["job_description"] = text

        filled = {name: value for name, value in updates.items() if value}
        source = f"{self.name}:{pattern.platform}"
        return record.fill(source, **filled), len(filled)
