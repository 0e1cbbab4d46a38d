"""
Import session model for the Flomo importer.

FlomoCore holds everything one import run knows: the ordered memos, the tag
list, the output buckets and any non-fatal warnings.
"""

from typing import Dict, List
from pydantic import BaseModel, Field, PrivateAttr

from .memo import Memo


FRAGMENT_SEPARATOR = "\n\n---\n\n"


class FlomoCore(BaseModel):
    """
    State of a single import run.

    ``files`` maps a vault-relative output path to the content fragments that
    will be concatenated into it, in insertion order.
    """

    memos: List[Memo] = Field(
        default_factory=list,
        description="Memos in source document order"
    )

    tags: List[str] = Field(
        default_factory=list,
        description="Tags declared by the export"
    )

    files: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Output path to ordered content fragments"
    )

    warnings: List[str] = Field(
        default_factory=list,
        description="Problems that did not abort the run"
    )

    _sealed: bool = PrivateAttr(default=False)

    def add_fragment(self, file_path: str, fragment: str) -> None:
        """Append a fragment to the bucket for ``file_path``, creating it if needed."""
        if self._sealed:
            raise RuntimeError("FlomoCore is sealed; buckets can no longer change")
        self.files.setdefault(file_path, []).append(fragment)

    def seal(self) -> None:
        """Freeze the bucket mapping once aggregation is done."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def render_file(self, file_path: str) -> str:
        """Join the fragments of one bucket into the final file text."""
        return FRAGMENT_SEPARATOR.join(self.files[file_path])

    def latest(self, limit: int) -> List[Memo]:
        """Return the ``limit`` most recent memos (the export lists newest first)."""
        return self.memos[:max(limit, 0)]
