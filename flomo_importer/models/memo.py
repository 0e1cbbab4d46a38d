"""
Memo model for the Flomo importer.

This module defines the record every importer converts a source entry into.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class Memo(BaseModel):
    """
    One timestamped entry from a flomo export.

    Memos keep the order they had in the source document; the aggregator
    derives file names from that order.
    """

    date: str = Field(
        ...,
        description="Calendar date of the memo (YYYY-MM-DD), used as grouping key and path segment"
    )

    time: str = Field(
        default="",
        description="Clock time of the memo as written in the export"
    )

    title: str = Field(
        ...,
        description="File-name friendly label derived from the memo timestamp"
    )

    content: str = Field(
        ...,
        description="Markdown body, still carrying the highlight placeholder"
    )

    attachments: List[str] = Field(
        default_factory=list,
        description="Vault-relative references to the memo's attachments"
    )

    file_path: Optional[str] = Field(
        default=None,
        description="Vault-relative output path, assigned during aggregation"
    )

    @field_validator("date", "title")
    @classmethod
    def _must_be_path_safe(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"{value!r} is not usable as a path segment")
        return value
