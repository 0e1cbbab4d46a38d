"""
Base importer interface for the Flomo importer.

This module defines the abstract interface that all memo sources implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import FlomoCore, Memo


class BaseImporter(ABC):
    """
    Abstract base class for all memo sources.

    Each importer turns its source into an ordered list of Memo objects and
    the list of tags the source declares.
    """

    @abstractmethod
    def get_all_memos(self) -> List[Memo]:
        """
        Retrieve all memos from the source, in source order.

        Returns:
            List of Memo objects
        """
        pass

    def get_tags(self) -> List[str]:
        """
        Retrieve the tags declared by the source.

        Returns:
            List of tag names, empty if the source has none
        """
        return []

    def build_core(self) -> FlomoCore:
        """Assemble a fresh import session from this source."""
        return FlomoCore(memos=self.get_all_memos(), tags=self.get_tags())
