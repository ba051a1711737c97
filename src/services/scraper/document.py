# =============================================================================
# Document Parsing Helpers
# =============================================================================
"""
Thin helpers over BeautifulSoup used by the extraction strategies.

Job board markup is frequently malformed, so parsing uses the lenient
``lxml`` tree builder and every helper degrades to an empty result instead
of raising when a selector does not match.
"""

import copy
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
HTML_PARSER = "lxml"
NON_CONTENT_SELECTOR = "script, style"

Node = Union[BeautifulSoup, Tag]


def parse_document(html: Optional[str]) -> BeautifulSoup:
    """
    Parse raw HTML into a queryable document.

    Args:
        html: Raw HTML text. May be empty or malformed.

    Returns:
        BeautifulSoup document; empty when the input has no markup.
    """
    return BeautifulSoup(html or "", HTML_PARSER)


def select_first(root: Node, selector: str) -> Optional[Tag]:
    """Return the first element matching a CSS selector, in document order."""
    return root.select_one(selector)


def select_all(root: Node, selector: str) -> list[Tag]:
    """Return all elements matching a CSS selector, in document order."""
    return list(root.select(selector))


def text_of(element: Optional[Node]) -> str:
    """
    Get the trimmed text content of an element.

    Text nodes are concatenated without separators, matching how the
    browser's ``textContent`` reads.
    """
    if element is None:
        return ""
    return element.get_text().strip()


def attribute_of(element: Optional[Tag], name: str) -> str:
    """
    Get an attribute value from an element.

    Multi-valued attributes such as ``class`` are joined with spaces.
    """
    if element is None:
        return ""

    value = element.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()


def clone_without(element: Tag, selector: str) -> Tag:
    """
    Deep-copy an element and remove every descendant matching a selector.

    The original document is left untouched, so the same element can be
    scored by several strategies.

    Args:
        element: Element to copy.
        selector: CSS selector group of descendants to drop.

    Returns:
        Detached copy of the element.
    """
    clone = copy.copy(element)
    for descendant in clone.select(selector):
        descendant.decompose()
    return clone


def meta_content(soup: BeautifulSoup, key: str) -> str:
    """
    Read the content of a ``<meta>`` tag by ``property`` or ``name``.

    Args:
        soup: Parsed document.
        key: Meta key, e.g. "og:title" or "description".

    Returns:
        Trimmed content value, or an empty string if absent.
    """
    element = soup.select_one(f'meta[property="{key}"], meta[name="{key}"]')
    return attribute_of(element, "content")


def parse_fragment_text(fragment: str) -> str:
    """
    Extract the text of an HTML fragment, ignoring scripts and styles.

    Args:
        fragment: HTML snippet, e.g. a description embedded in JSON.

    Returns:
        Trimmed text content of the fragment.
    """
    soup = parse_document(fragment)
    for element in soup.select(NON_CONTENT_SELECTOR):
        element.decompose()
    return text_of(soup)
