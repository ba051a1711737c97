# =============================================================================
# Shared Test Fixtures
# =============================================================================
"""
Fixtures for building job posting pages and stubbed HTTP clients.
"""

import json
from typing import Any, Callable

import httpx
import pytest
from bs4 import BeautifulSoup

from src.services.scraper.document import parse_document


# -----------------------------------------------------------------------------
# Page Builders
# -----------------------------------------------------------------------------
DESCRIPTION_INTRO = (
    "We are looking for a backend engineer to join the platform team. "
    "Responsibilities include designing APIs and owning services in production. "
    "Requirements: 3 years of experience and a degree in computer science."
)


@pytest.fixture
def build_page() -> Callable[..., str]:
    """
    Build a minimal HTML document.

    Returns:
        Function taking ``body`` and ``head`` markup.
    """

    def _build(body: str = "", head: str = "") -> str:
        return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"

    return _build


@pytest.fixture
def description_text() -> Callable[[int], str]:
    """
    Build job-description-like text with a given number of filler words.

    The text carries the keywords the heuristic scorer rewards and none of
    the boilerplate it penalizes.

    Returns:
        Function taking the number of filler words.
    """

    def _build(filler_words: int) -> str:
        filler = " ".join(f"detail{i}" for i in range(filler_words))
        return f"{DESCRIPTION_INTRO} {filler}".strip()

    return _build


@pytest.fixture
def json_ld_script() -> Callable[[Any], str]:
    """
    Render a payload as a JSON-LD script tag.

    Returns:
        Function taking the payload to embed.
    """

    def _build(payload: Any) -> str:
        payload_json = json.dumps(payload).replace("</", "<\\/")
        return f'<script type="application/ld+json">{payload_json}</script>'

    return _build


@pytest.fixture
def soup_of(build_page: Callable[..., str]) -> Callable[..., BeautifulSoup]:
    """
    Parse a page built from body/head markup.

    Returns:
        Function taking ``body`` and ``head`` markup.
    """

    def _parse(body: str = "", head: str = "") -> BeautifulSoup:
        return parse_document(build_page(body=body, head=head))

    return _parse


# -----------------------------------------------------------------------------
# HTTP Stubs
# -----------------------------------------------------------------------------
@pytest.fixture
def html_handler() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """
    Build an httpx MockTransport handler that serves fixed HTML.

    Returns:
        Function taking the HTML body and optional status code.
    """

    def _build(html: str, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status_code,
                text=html,
                headers={"Content-Type": "text/html; charset=utf-8"},
            )

        return handler

    return _build
