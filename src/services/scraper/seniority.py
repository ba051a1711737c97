# =============================================================================
# Seniority Classifier
# =============================================================================
"""
Derive a coarse seniority level from a job title.
"""

import re

from src.models.job import Seniority


# -----------------------------------------------------------------------------
# Keyword Tables
# -----------------------------------------------------------------------------
# Checked top to bottom, first match wins. Matching is case-insensitive
# substring matching, so "sr " relies on the trailing space.
INTERN_KEYWORDS = ("intern", "internship")
SENIOR_KEYWORDS = ("senior", "sr.", "sr ", "lead", "principal", "staff")
MID_KEYWORDS = ("mid", "intermediate")
JUNIOR_KEYWORDS = ("junior", "jr.", "jr ", "entry")

YEARS_OF_EXPERIENCE_PATTERN = re.compile(r"\d+\+?\s*years?")

DEFAULT_SENIORITY: Seniority = "junior"


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def detect_seniority(role: str) -> Seniority:
    """
    Classify a role title as intern, junior, mid or senior.

    Args:
        role: Job title, e.g. "Senior Backend Engineer".

    Returns:
        The seniority level; "junior" when no keyword matches.

    Example:
        >>> detect_seniority("Software Engineer II (3+ years)")
        'mid'
    """
    role_lower = (role or "").lower()

    if _contains_any(role_lower, INTERN_KEYWORDS):
        return "intern"

    if _contains_any(role_lower, SENIOR_KEYWORDS):
        return "senior"

    if _contains_any(role_lower, MID_KEYWORDS) or YEARS_OF_EXPERIENCE_PATTERN.search(role_lower):
        return "mid"

    if _contains_any(role_lower, JUNIOR_KEYWORDS):
        return "junior"

    return DEFAULT_SENIORITY
