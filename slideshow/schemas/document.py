"""Pydantic models for the slideshow document (the single *.yml per folder).

The document is a two-level tree: sections hold flows and, optionally,
subsections which hold flows only.  A flow is one timed statement of HTML
text shown beside the SVG whose file name matches the flow's ``id``.

Keys are camelCase on the wire (``svgPaneBackgroundColor``) and snake_case
in Python.  Documents written before ``sections`` was introduced use the key
``illustration``; both are accepted.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError


FONT_SIZE_PATTERN = r"^[0-9.]+(em|px|vmax)$"
COLOR_PATTERN = r"^#[0-9A-Fa-f]{3,8}$"
BORDER_PATTERN = r"^[a-z]+ [0-9]+px$"
FLOW_ID_PATTERN = r"^[-a-zA-Z0-9._]+$"


# ---------------------------------------------------------------------------
# Flows
# ---------------------------------------------------------------------------

class Flow(BaseModel):
    """A timed unit of narration paired with an SVG asset."""

    id: str = Field(
        pattern=FLOW_ID_PATTERN,
        description="Root asset name (SVG file name without extension)",
    )
    html: str = Field(description="HTML text shown in the text pane")
    seconds: float = Field(description="Seconds to animate the transition to this flow")
    centered: Optional[bool] = None
    focus: Optional[str] = Field(
        default=None,
        description="Viewport pan/zoom directive: 'x,y,w,h;... <start> <end>'",
    )
    highlight: Optional[str] = Field(
        default=None,
        description="Rectangle highlight directive: '<rects> <color> <thickness> <opacities> <start> <end>'",
    )


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

class Subsection(BaseModel):
    """Second (and last) nesting level: flows only."""

    model_config = ConfigDict(extra="forbid")

    flows: list[Flow]


class Section(BaseModel):
    """Top-level section: its own flows, then its subsections' flows."""

    flows: list[Flow]
    subsections: Optional[list[Subsection]] = None


# ---------------------------------------------------------------------------
# Top-level document
# ---------------------------------------------------------------------------

class Document(BaseModel):
    """Complete slideshow description.

    Style settings are carried through untouched to the page renderer;
    only ``sections`` is transformed by the compiler passes.
    """

    model_config = ConfigDict(populate_by_name=True)

    min_size: str = Field(alias="min", pattern=FONT_SIZE_PATTERN,
                          description="Font size of inactive flows")
    max_size: str = Field(alias="max", pattern=FONT_SIZE_PATTERN,
                          description="Font size of the active flow")
    svg_pane_background_color: Optional[str] = Field(
        default=None, alias="svgPaneBackgroundColor", pattern=COLOR_PATTERN,
    )
    text_pane_background_color: Optional[str] = Field(
        default=None, alias="textPaneBackgroundColor", pattern=COLOR_PATTERN,
    )
    top_border: Optional[str] = Field(default=None, alias="topBorder", pattern=BORDER_PATTERN)
    bottom_border: Optional[str] = Field(default=None, alias="bottomBorder", pattern=BORDER_PATTERN)
    left_border: Optional[str] = Field(default=None, alias="leftBorder", pattern=BORDER_PATTERN)
    right_border: Optional[str] = Field(default=None, alias="rightBorder", pattern=BORDER_PATTERN)
    flip_panes: Optional[bool] = Field(
        default=None, alias="flipPanes",
        description="Put the text pane before the SVG pane",
    )
    landscape_only: Optional[bool] = Field(
        default=None, alias="landscapeOnly",
        description="Ask portrait viewers to rotate their device",
    )
    sections: list[Section] = Field(
        validation_alias=AliasChoices("sections", "illustration"),
        serialization_alias="sections",
    )

    def to_payload(self) -> dict[str, Any]:
        """Wire-shaped dict: camelCase keys, unset optionals omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


def validate_document(data: Any) -> list[str]:
    """Validate raw document data, returning readable errors (empty if valid)."""
    try:
        Document.model_validate(data)
    except ValidationError as e:
        errors = []
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"]) or "<document>"
            errors.append(f"{loc}: {err['msg']}")
        return errors
    return []
