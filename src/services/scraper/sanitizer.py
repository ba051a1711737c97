# =============================================================================
# Text Sanitizer
# =============================================================================
"""
Normalization of text pulled out of job posting pages.

Every string returned by the extraction pipeline goes through ``clean_text``,
so callers never see markup, HTML entities or runs of whitespace.
"""

import re
from typing import Optional


# -----------------------------------------------------------------------------
# Patterns
# -----------------------------------------------------------------------------
SCRIPT_BLOCK_PATTERN = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE
)
STYLE_BLOCK_PATTERN = re.compile(
    r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE
)
TAG_PATTERN = re.compile(r"<[^>]+>")
WHITESPACE_PATTERN = re.compile(r"\s+")
NEWLINES_PATTERN = re.compile(r"\n+")

# Decoded in this order
HTML_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&rsquo;", "'"),
    ("&lsquo;", "'"),
    ("&rdquo;", '"'),
    ("&ldquo;", '"'),
)


def _clean_once(text: str) -> str:
    """Run a single sanitization pass."""
    text = SCRIPT_BLOCK_PATTERN.sub("", text)
    text = STYLE_BLOCK_PATTERN.sub("", text)
    text = TAG_PATTERN.sub(" ", text)

    for entity, replacement in HTML_ENTITIES:
        text = text.replace(entity, replacement)

    text = WHITESPACE_PATTERN.sub(" ", text)
    text = NEWLINES_PATTERN.sub("\n", text)
    return text.strip()


def clean_text(text: Optional[str]) -> str:
    """
    Strip markup from text and normalize its whitespace.

    Removes ``<script>``/``<style>`` blocks with their content, replaces the
    remaining tags with spaces, decodes a fixed set of named entities and
    collapses whitespace.

    Decoding can reveal new markup (``&lt;p&gt;`` becomes ``<p>``), so passes
    are repeated until the text stops changing. Each pass that changes the
    text either shortens it or only swaps whitespace characters for spaces,
    so the loop terminates.

    The cost is that encoded comparison signs read as markup once decoded:
    ``"Pay &lt; $100k while experience &gt; 3 years"`` becomes
    ``"Pay 3 years"`` because ``< $100k while experience >`` is stripped as
    a tag on the second pass.

    Args:
        text: Raw text, possibly containing HTML.

    Returns:
        Sanitized text, or an empty string for empty input.
    """
    if not text:
        return ""

    previous = None
    cleaned = text
    while cleaned != previous:
        previous = cleaned
        cleaned = _clean_once(cleaned)
    return cleaned
