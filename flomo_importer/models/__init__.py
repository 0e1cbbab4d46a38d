"""Data models for the Flomo importer."""

from .memo import Memo
from .core import FlomoCore, FRAGMENT_SEPARATOR
from .settings import ImportSettings

__all__ = [
    "Memo",
    "FlomoCore",
    "FRAGMENT_SEPARATOR",
    "ImportSettings"
]
