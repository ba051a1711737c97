# =============================================================================
# Extraction Strategy Base
# =============================================================================
"""
Shared record type and abstract base class for extraction strategies.

Each strategy takes the partially-filled record and the parsed document and
returns a new record. Records are immutable; a strategy never mutates the
record it was given, so the pipeline reads as a simple reduction:

    record = strategy.apply(record, soup)

Note: Job board HTML changes frequently. Strategies should degrade to
"found nothing" when their selectors or embedded data do not match.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any

from bs4 import BeautifulSoup

from src.models.job import JobData, Seniority


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
MIN_DESCRIPTION_LENGTH = 100  # characters; shorter descriptions may be replaced

TEXT_FIELDS = ("company", "role", "job_description", "company_info")


# -----------------------------------------------------------------------------
# Parsed Job Data Structure
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ParsedJobData:
    """
    Job data accumulated while strategies run.

    Attributes:
        company: Employer name.
        role: Job title.
        job_description: Job description text.
        company_info: Description of the employer.
        seniority: Experience level, derived once all strategies ran.
        filled_by: Field name to the name of the strategy that filled it.
    """

    company: str = ""
    role: str = ""
    job_description: str = ""
    company_info: str = ""
    seniority: Seniority = "junior"
    filled_by: dict[str, str] = field(default_factory=dict)

    @property
    def description_is_short(self) -> bool:
        """Whether the description is missing or below the confidence length."""
        return len(self.job_description) < MIN_DESCRIPTION_LENGTH

    def fill(self, source: str, **values: Any) -> "ParsedJobData":
        """
        Return a copy with the given fields set.

        Empty values are ignored so that a strategy finding nothing for a
        field never clears what an earlier strategy accepted.

        Args:
            source: Name of the strategy providing the values.
            **values: Field values to set.

        Returns:
            Updated record, or this record if nothing was set.
        """
        updates = {name: value for name, value in values.items() if value}
        if not updates:
            return self

        filled_by = dict(self.filled_by)
        filled_by.update({name: source for name in updates})
        return replace(self, filled_by=filled_by, **updates)

    def to_job_data(self) -> JobData:
        """Convert to the API response model."""
        return JobData(
            company=self.company,
            role=self.role,
            job_description=self.job_description,
            company_info=self.company_info,
            seniority=self.seniority,
        )


# -----------------------------------------------------------------------------
# Base Strategy Abstract Class
# -----------------------------------------------------------------------------
class BaseExtractionStrategy(ABC):
    """
    Abstract base class for extraction strategies.

    Subclasses decide when they are worth running and how to read the
    document, and only fill fields that are still missing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name used in logs and in ``filled_by``."""
        pass

    @abstractmethod
    def should_run(self, record: ParsedJobData) -> bool:
        """
        Check if this strategy could still contribute to the record.

        Args:
            record: The record built so far.

        Returns:
            True if the strategy should be applied.
        """
        pass

    @abstractmethod
    def apply(self, record: ParsedJobData, soup: BeautifulSoup) -> ParsedJobData:
        """
        Extract data from the document into a new record.

        Args:
            record: The record built so far.
            soup: Parsed job posting document.

        Returns:
            Updated record.
        """
        pass
