# =============================================================================
# Config Package
# =============================================================================
"""
Application configuration and settings for the scraping backend.
"""

from src.config.settings import DEFAULT_SCRAPER_USER_AGENT, Settings, get_settings

__all__ = ["DEFAULT_SCRAPER_USER_AGENT", "Settings", "get_settings"]
