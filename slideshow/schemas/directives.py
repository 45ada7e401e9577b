"""Typed forms of the ``focus`` and ``highlight`` flow directives.

Numbers are parsed to Decimal for checks (non-negative, duration sign) while
the text of coordinates and thickness is kept so the markup repeats exactly
what the author wrote.
"""

from decimal import Decimal, localcontext
from typing import Optional

from pydantic import BaseModel, Field


class Quadruple(BaseModel):
    """A rectangular region of the SVG canvas."""

    x: Decimal = Field(ge=0)
    y: Decimal = Field(ge=0)
    w: Decimal = Field(ge=0)
    h: Decimal = Field(ge=0)
    source: str = Field(description="The 'x,y,w,h' text as written")

    def components(self) -> list[str]:
        return self.source.split(",")

    def as_view_box(self) -> str:
        """Space-separated form used by the viewBox attribute."""
        return " ".join(self.components())


class TimeRange(BaseModel):
    """Start and end of an animation, in seconds."""

    start: Decimal = Field(ge=0)
    end: Decimal = Field(ge=0)

    @property
    def duration(self) -> Decimal:
        # Exact subtraction: enough digits to span both operands.
        exponent = min(self.start.as_tuple().exponent, self.end.as_tuple().exponent)
        magnitude = max(self.start.adjusted(), self.end.adjusted())
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, magnitude - exponent + 2)
            return self.end - self.start


class FocusDirective(BaseModel):
    """Viewport pan/zoom: each quadruple is one keyframe of the viewBox."""

    keyframes: list[Quadruple] = Field(min_length=1)
    timing: TimeRange


class HighlightDirective(BaseModel):
    """Outlined rectangles sharing one stroke-opacity timeline."""

    rects: list[Quadruple] = Field(min_length=1)
    color: str = Field(min_length=1, description="Any whitespace-free CSS color")
    thickness: str = Field(description="Stroke width as written")
    opacity_keyframes: str = Field(description="Opacity values as written, ';' or ',' joined")
    timing: TimeRange


class CompiledDirectives(BaseModel):
    """Animation markup compiled for one flow, keyed by qualified id."""

    focus: Optional[str] = None
    highlight: Optional[str] = None
