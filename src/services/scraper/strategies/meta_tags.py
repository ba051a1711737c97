# =============================================================================
# Meta Tag Fallback Strategy
# =============================================================================
"""
Last-resort extraction from Open Graph / description meta tags and the
document ``<title>``.

Career pages commonly title themselves "Role | Company", so the first and
last ``|`` segments of the title stand in for the role and company.
"""

from bs4 import BeautifulSoup

from src.services.scraper.document import meta_content, text_of
from src.services.scraper.sanitizer import clean_text
from src.services.scraper.strategies.base import BaseExtractionStrategy, ParsedJobData


TITLE_SEPARATOR = "|"


class MetaTagStrategy(BaseExtractionStrategy):
    """Fills any still-empty field from meta tags or the page title."""

    @property
    def name(self) -> str:
        return "meta_tags"

    def should_run(self, record: ParsedJobData) -> bool:
        return True

    def apply(self, record: ParsedJobData, soup: BeautifulSoup) -> ParsedJobData:
        title_segments = text_of(soup.title).split(TITLE_SEPARATOR)
        updates: dict[str, str] = {}

        if not record.company:
            updates["company"] = (
                meta_content(soup, "og:site_name")
                or clean_text(title_segments[-1])
            )

        if not record.role:
            updates["role"] = (
                meta_content(soup, "og:title")
                or clean_text(title_segments[0])
            )

        # Empty only; a short description from an earlier strategy is kept
        if not record.job_description:
            updates["job_description"] = (
                meta_content(soup, "og:description")
                or meta_content(soup, "description")
            )

        return record.fill(self.name, **updates)
