"""
Two-phase highlight rewrite.

flomo marks highlighted text with ``<mark>...</mark>``; Obsidian uses
``==...==``. Writing ``==`` straight into the HTML would let the Markdown
converter escape it (a leading ``=`` becomes ``\\=``), so the tags are first
swapped for a placeholder that no later transform touches, and the
placeholder is turned into ``==`` only when the final memo text is assembled.

``protect`` runs in the extractor before HTML to Markdown conversion;
``restore`` runs in the aggregator before any other content transform.
Nothing may be inserted between the two that rewrites the placeholder.
"""

import re


HIGHLIGHT_PLACEHOLDER = "FLOMOIMPORTERHIGHLIGHTMARKPLACEHOLDER"
HIGHLIGHT_DELIMITER = "=="

_MARK_TAG = re.compile(r"<\s*/?\s*mark\b[^>]*>", re.IGNORECASE)


def protect(html_fragment: str) -> str:
    """Replace every opening and closing mark tag with the placeholder."""
    return _MARK_TAG.sub(HIGHLIGHT_PLACEHOLDER, html_fragment)


def restore(text: str) -> str:
    """Replace every placeholder with the Markdown highlight delimiter."""
    return text.replace(HIGHLIGHT_PLACEHOLDER, HIGHLIGHT_DELIMITER)
