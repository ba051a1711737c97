# =============================================================================
# Extraction Strategies Package
# =============================================================================
"""
Ordered extraction strategies for job posting pages.

Strategies run highest-confidence first. Later strategies only fill fields
that earlier ones left empty (or, for the description, too short).
"""

from src.services.scraper.strategies.ats_config import AtsConfigStrategy
from src.services.scraper.strategies.ats_patterns import ATS_PATTERNS, AtsPattern, AtsPatternStrategy
from src.services.scraper.strategies.base import (
    MIN_DESCRIPTION_LENGTH,
    BaseExtractionStrategy,
    ParsedJobData,
)
from src.services.scraper.strategies.heuristics import HeuristicStrategy
from src.services.scraper.strategies.meta_tags import MetaTagStrategy
from src.services.scraper.strategies.structured_data import StructuredDataStrategy


# -----------------------------------------------------------------------------
# Strategy Registry
# -----------------------------------------------------------------------------
def get_strategies() -> list[BaseExtractionStrategy]:
    """
    Get the extraction strategies in priority order.

    Returns:
        List of strategy instances, structured data first, meta tags last.
    """
    return [
        StructuredDataStrategy(),
        AtsConfigStrategy(),
        AtsPatternStrategy(),
        HeuristicStrategy(),
        MetaTagStrategy(),  # Always last as fallback
    ]


__all__ = [
    "ATS_PATTERNS",
    "MIN_DESCRIPTION_LENGTH",
    "AtsConfigStrategy",
    "AtsPattern",
    "AtsPatternStrategy",
    "BaseExtractionStrategy",
    "HeuristicStrategy",
    "MetaTagStrategy",
    "ParsedJobData",
    "StructuredDataStrategy",
    "get_strategies",
]
