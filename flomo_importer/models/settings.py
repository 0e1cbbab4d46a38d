"""
Import settings for the Flomo importer.

The option names of the original plugin (``flomoTarget``, ``mergeByDate`` ...)
are accepted as aliases so saved settings can be loaded unchanged.
"""

from typing import Any, Literal, Mapping
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidInputError


class ImportSettings(BaseModel):
    """
    Options controlling where and how memos are written.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    flomo_target: str = Field(
        default="flomo",
        alias="flomoTarget",
        description="Base folder inside the vault"
    )

    memo_target: str = Field(
        default="memos",
        alias="memoTarget",
        description="Memo folder under the base folder"
    )

    merge_by_date: bool = Field(
        default=False,
        alias="mergeByDate",
        description="Write one file per date instead of one file per memo"
    )

    allow_bilink: bool = Field(
        default=True,
        alias="expOptionAllowbilink",
        description="Turn escaped [[...]] sequences back into live links"
    )

    options_moments: Literal["copy_with_link", "skip"] = Field(
        default="copy_with_link",
        alias="optionsMoments",
        description="Moments digest mode"
    )

    options_canvas: Literal["copy_with_link", "copy_with_content", "skip"] = Field(
        default="copy_with_link",
        alias="optionsCanvas",
        description="Canvas layout mode"
    )

    canvas_size: Literal["S", "M", "L"] = Field(
        default="M",
        alias="canvasSize",
        description="Canvas node size"
    )

    @field_validator("flomo_target", "memo_target")
    @classmethod
    def _must_stay_inside_vault(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("must not be empty")
        if ".." in value.split("/") or "\\" in value:
            raise ValueError(f"{value!r} must be a folder inside the vault")
        return value

    @property
    def memo_root(self) -> str:
        """Vault-relative folder that holds the per-date memo folders."""
        return f"{self.flomo_target}/{self.memo_target}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ImportSettings":
        """
        Validate a loose settings mapping.

        Raises:
            InvalidInputError: if a key is unknown or a value is not acceptable
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise InvalidInputError(f"Invalid import settings: {e}") from e
