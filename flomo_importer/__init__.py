"""
Flomo importer: turns a flomo export archive into Markdown notes.

Reads the HTML page of a flomo export, converts every memo to Markdown and
writes it into an Obsidian-style vault together with the attachments, a
Moments digest and a canvas overview.
"""

__version__ = "0.1.0"
__author__ = "Flomo Importer Project"

# Import main components
from .errors import (
    FlomoImportError,
    InvalidInputError,
    ExtractionError,
    MissingDocumentError,
    WriteError,
    RelocationError
)
from .models import Memo, FlomoCore, ImportSettings
from .importers import BaseImporter, MockImporter, FlomoHTMLImporter
from .vault import Vault
from .pipeline import FlomoImporter

__all__ = [
    "FlomoImportError",
    "InvalidInputError",
    "ExtractionError",
    "MissingDocumentError",
    "WriteError",
    "RelocationError",
    "Memo",
    "FlomoCore",
    "ImportSettings",
    "BaseImporter",
    "MockImporter",
    "FlomoHTMLImporter",
    "Vault",
    "FlomoImporter"
]
