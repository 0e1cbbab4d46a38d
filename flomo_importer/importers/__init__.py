"""Memo sources for the Flomo importer."""

from .base import BaseImporter
from .mock import MockImporter
from .flomo_html import FlomoHTMLImporter, extract, rewrite_attachment_path

__all__ = ["BaseImporter", "MockImporter", "FlomoHTMLImporter", "extract", "rewrite_attachment_path"]
