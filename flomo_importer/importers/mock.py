"""
Mock importer for testing the Flomo importer.

This module provides a canned memo source so aggregation, writing and the
derived views can be exercised without building an export archive.
"""

from typing import List, Optional

from ..markup.highlight import HIGHLIGHT_PLACEHOLDER
from ..models import Memo
from .base import BaseImporter


class MockImporter(BaseImporter):
    """
    Mock importer that returns hardcoded memos.

    The default set spans two dates, newest first, like a real export.
    """

    def __init__(self, memos: Optional[List[Memo]] = None, tags: Optional[List[str]] = None):
        """Initialize the mock importer with test data."""
        self._memos = memos if memos is not None else self._create_test_memos()
        self._tags = tags if tags is not None else ["#reading", "#work"]

    def get_all_memos(self) -> List[Memo]:
        """
        Return all hardcoded memos.

        Returns:
            List of test Memo objects
        """
        return [memo.model_copy(deep=True) for memo in self._memos]

    def get_tags(self) -> List[str]:
        return list(self._tags)

    @staticmethod
    def make_memo(stamp: str, body: str) -> Memo:
        """Build a memo the way the HTML importer would for ``stamp``."""
        date, _, clock = stamp.partition(" ")
        return Memo(
            date=date,
            time=clock,
            title=stamp.replace("-", "_").replace(":", "_").replace(" ", "_"),
            content=f"📅 [[{date}]] {clock}\n\n{body}",
        )

    def _create_test_memos(self) -> List[Memo]:
        """
        Create hardcoded memos covering links, highlights and shared dates.

        Returns:
            List of test memos
        """
        return [
            self.make_memo(
                "2024-05-23 21:10:00",
                "Finished \\[\\[The Pragmatic Programmer\\]\\] #reading"
            ),
            self.make_memo(
                "2024-05-23 09:30:15",
                f"Standup notes: {HIGHLIGHT_PLACEHOLDER}ship on Friday{HIGHLIGHT_PLACEHOLDER}"
            ),
            self.make_memo(
                "2024-05-22 18:45:00",
                "Met \\[\\[Jane Doe\\]\\] about \\[\\[Project Phoenix\\]\\] #work"
            ),
        ]
