# =============================================================================
# Heuristic Scoring Strategy
# =============================================================================
"""
Generic fallback for pages no platform-specific strategy understood.

Candidate elements are scored on textual signals that look like a job title
or a job description, and the best candidate with a positive score wins.
Keyword patterns and weights live in module constants so they can be tuned
without touching the control flow.
"""

import logging
import re
from typing import NamedTuple, Optional

from bs4 import BeautifulSoup

from src.services.scraper.document import clone_without, select_all, text_of
from src.services.scraper.strategies.base import BaseExtractionStrategy, ParsedJobData


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


class Candidate(NamedTuple):
    """A text snippet considered for a field, with its score."""

    text: str
    score: int


# -----------------------------------------------------------------------------
# Title Scoring
# -----------------------------------------------------------------------------
TITLE_SELECTOR = "h1, h2"
TITLE_MIN_LENGTH = 5  # exclusive
TITLE_MAX_LENGTH = 100  # exclusive

JOB_TITLE_PATTERN = re.compile(
    r"engineer|developer|manager|analyst|designer|specialist|coordinator|director",
    re.IGNORECASE,
)
SENIORITY_PATTERN = re.compile(
    r"senior|junior|lead|staff|principal|intern", re.IGNORECASE
)

TITLE_LENGTH_SCORE = 10
TITLE_KEYWORD_SCORE = 20
TITLE_SENIORITY_SCORE = 10


# -----------------------------------------------------------------------------
# Description Scoring
# -----------------------------------------------------------------------------
DESCRIPTION_SELECTOR = (
    'main, article, section, div[class*="content"], '
    'div[class*="description"], div[id*="description"]'
)
DESCRIPTION_NOISE_SELECTOR = (
    "script, style, nav, header, footer, aside, "
    ".sidebar, .apply, .share, .navigation"
)

# (minimum word count, exclusive; score)
WORD_COUNT_BONUSES = ((100, 20), (300, 20), (500, 10))
SHORT_WORD_COUNT = 50
SHORT_PENALTY = -50
LONG_WORD_COUNT = 3000
LONG_PENALTY = -20

# (pattern, score)
CONTENT_SIGNALS = (
    (re.compile(r"responsibilities|qualifications|requirements|experience|skills", re.IGNORECASE), 30),
    (re.compile(r"bachelor|master|degree|years of experience", re.IGNORECASE), 20),
    (re.compile(r"we are looking for|the ideal candidate|you will", re.IGNORECASE), 15),
    (re.compile(r"privacy policy|terms of service|©|copyright|all rights reserved", re.IGNORECASE), -30),
    (re.compile(r"apply now|share this job|back to jobs", re.IGNORECASE), -10),
)


def score_title(text: str) -> int:
    """
    Score how much a heading looks like a job title.

    Args:
        text: Trimmed heading text.

    Returns:
        Non-negative score; zero means "not a title".
    """
    score = 0
    if TITLE_MIN_LENGTH < len(text) < TITLE_MAX_LENGTH:
        score += TITLE_LENGTH_SCORE
    if JOB_TITLE_PATTERN.search(text):
        score += TITLE_KEYWORD_SCORE
    if SENIORITY_PATTERN.search(text):
        score += TITLE_SENIORITY_SCORE
    return score


def score_description(text: str) -> int:
    """
    Score how much a block of text looks like a job description.

    Length bonuses reward substantial content, keyword signals reward
    job-posting language, and penalties push down fragments, whole-page
    wrappers and footer or navigation boilerplate.

    Args:
        text: Trimmed text of a candidate element.

    Returns:
        Score, possibly negative.
    """
    word_count = len(text.split())
    score = 0

    for threshold, bonus in WORD_COUNT_BONUSES:
        if word_count > threshold:
            score += bonus

    for pattern, signal_score in CONTENT_SIGNALS:
        if pattern.search(text):
            score += signal_score

    if word_count < SHORT_WORD_COUNT:
        score += SHORT_PENALTY
    if word_count > LONG_WORD_COUNT:
        score += LONG_PENALTY

    return score


def best_candidate(candidates: list[Candidate]) -> Optional[Candidate]:
    """
    Pick the highest-scoring candidate with a positive score.

    Ties go to the earliest candidate in document order.
    """
    if not candidates:
        return None
    best = max(candidates, key=lambda candidate: candidate.score)
    return best if best.score > 0 else None


class HeuristicStrategy(BaseExtractionStrategy):
    """Fills the role and description from the best-scoring elements."""

    @property
    def name(self) -> str:
        return "heuristics"

    def should_run(self, record: ParsedJobData) -> bool:
        # A missing role alone triggers the title pass, even after a long
        # description was accepted, so the best heading wins over og:title
        return not record.role or record.description_is_short

    def apply(self, record: ParsedJobData, soup: BeautifulSoup) -> ParsedJobData:
        updates: dict[str, str] = {}

        if not record.role:
            title = best_candidate(self._title_candidates(soup))
            if title is not None:
                logger.debug(f"Heuristic title '{title.text}' (score {title.score})")
                updates["role"] = title.text

        if record.description_is_short:
            description = best_candidate(self._description_candidates(soup))
            if description is not None:
                logger.debug(
                    f"Heuristic description of {len(description.text)} chars "
                    f"(score {description.score})"
                )
                updates["job_description"] = description.text

        return record.fill(self.name, **updates)

    def _title_candidates(self, soup: BeautifulSoup) -> list[Candidate]:
        candidates = []
        for heading in select_all(soup, TITLE_SELECTOR):
            text = text_of(heading)
            candidates.append(Candidate(text=text, score=score_title(text)))
        return candidates

    def _description_candidates(self, soup: BeautifulSoup) -> list[Candidate]:
        candidates = []
        for element in select_all(soup, DESCRIPTION_SELECTOR):
            text = text_of(clone_without(element, DESCRIPTION_NOISE_SELECTOR))
            candidates.append(Candidate(text=text, score=score_description(text)))
        return candidates
