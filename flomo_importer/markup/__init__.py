"""Text transforms applied to memo markup."""

from . import highlight
from .html import parse_html
from .links import unescape_bilinks
from .markdown import MarkdownConverter, escape_markdown

__all__ = ["highlight", "parse_html", "unescape_bilinks", "MarkdownConverter", "escape_markdown"]
