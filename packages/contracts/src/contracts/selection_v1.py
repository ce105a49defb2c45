from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrameV1(BaseModel):
    """One component stack entry as captured in the browser."""

    raw: str = Field(description="original line of text, kept verbatim")
    name: Optional[str] = Field(default=None, description="component identifier, if known")
    file: str = Field(description="unnormalized source path")
    line: int = Field(ge=1)
    col: int = Field(ge=1)

    @field_validator("line", "col", mode="before")
    @classmethod
    def reject_bool(cls, v: Any) -> Any:
        # bool is an int subclass; JSON true/false are never positions
        if isinstance(v, bool):
            raise ValueError("must be a positive integer")
        return v


class SelectionPayloadV1(BaseModel):
    """
    Public input contract (v1).
    This is what the browser bridge posts to the selection endpoint for every
    element the user grabs.
    """

    model_config = ConfigDict(populate_by_name=True)

    schema_version: Literal["selection.v1"] = "selection.v1"

    dom_label: Optional[str] = Field(default=None, alias="domLabel")

    # index 0 is the frame closest to the selected element
    frames: list[FrameV1] = Field(min_length=1)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"schema_version"})
