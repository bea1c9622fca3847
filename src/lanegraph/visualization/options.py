"""
Render configuration.

Validated at construction so that a bad width or style fails where the
renderer is built, not halfway through a render.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RenderOptions(BaseModel):
    """Options shared by every renderer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    style: Literal["ascii", "unicode"] = Field(
        default="ascii",
        description="Glyph set: plain ASCII or box-drawing characters",
    )
    show_labels: bool = Field(
        default=True,
        description="Append node labels after the graph; status glyphs stay visible",
    )
    max_label_width: int = Field(
        default=40,
        ge=1,
        description="Labels wider than this many terminal cells are truncated",
    )
    compact: bool = Field(
        default=False, description="Omit branch and merge connector lines"
    )
    colors: bool = Field(
        default=False, description="Style lanes and states in render_text()"
    )

    def merged(self, **overrides: object) -> "RenderOptions":
        """Return a copy with overrides applied and re-validated."""
        if not overrides:
            return self
        return RenderOptions.model_validate({**self.model_dump(), **overrides})
