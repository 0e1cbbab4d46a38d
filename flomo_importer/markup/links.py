"""
Bidirectional link handling.

The Markdown converter escapes square brackets, so a ``[[Page]]`` typed in
flomo arrives as ``\\[\\[Page\\]\\]``.
"""

ESCAPED_LINK_OPEN = "\\[\\["
ESCAPED_LINK_CLOSE = "\\]\\]"


def unescape_bilinks(text: str) -> str:
    """Turn every escaped double-bracket pair back into live link syntax."""
    return text.replace(ESCAPED_LINK_OPEN, "[[").replace(ESCAPED_LINK_CLOSE, "]]")
