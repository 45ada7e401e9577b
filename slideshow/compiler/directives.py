"""Compile flow ``focus`` and ``highlight`` directives into SVG animation markup.

Grammars (tokens separated by whitespace, no whitespace inside a token):

    focus     := rects start end
    highlight := rects color thickness opacities start end

    rects     := rect (";" rect)*
    rect      := number "," number "," number "," number
    opacities := number ((";" | ",") number)*
    color     := any non-whitespace characters (a CSS color)
    number    := digit+ ("." digit*)? | "." digit+

A focus directive animates the SVG viewBox through its rectangles as
keyframes.  A highlight directive draws one rounded outline per rectangle,
all sharing the same stroke and stroke-opacity timeline.  Both begin at
``start`` seconds, run for ``end - start`` seconds and freeze on the last
keyframe.
"""

import logging
import re
from decimal import Decimal
from html import escape

from slideshow.compiler.uniqify import FlowRef
from slideshow.errors import ErrorKind, SlideshowError
from slideshow.schemas.directives import (
    CompiledDirectives,
    FocusDirective,
    HighlightDirective,
    Quadruple,
    TimeRange,
)

logger = logging.getLogger(__name__)

HIGHLIGHT_CORNER_RADIUS = 10

_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class DirectiveSyntaxError(ValueError):
    """A directive string does not match its grammar."""


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

class _Scanner:
    """Cursor over a single whitespace-free token."""

    def __init__(self, text: str, what: str):
        self.text = text
        self.what = what
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if not self.at_end() else ""

    def number(self) -> Decimal:
        match = _NUMBER.match(self.text, self.pos)
        if match is None:
            self.fail("expected a number")
        self.pos = match.end()
        return Decimal(match.group())

    def expect(self, char: str) -> None:
        if self.peek() != char:
            self.fail(f"expected '{char}'")
        self.pos += 1

    def finish(self) -> None:
        if not self.at_end():
            self.fail("unexpected trailing characters")

    def fail(self, reason: str):
        found = repr(self.peek()) if not self.at_end() else "end of input"
        raise DirectiveSyntaxError(
            f"{self.what} '{self.text}': {reason} at position {self.pos}, found {found}"
        )


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

def parse_number(token: str, what: str) -> Decimal:
    scanner = _Scanner(token, what)
    value = scanner.number()
    scanner.finish()
    return value


def parse_rects(token: str) -> list[Quadruple]:
    """Parse ``x,y,w,h;x,y,w,h;...`` into one or more quadruples."""
    scanner = _Scanner(token, "rectangle list")
    rects = []
    while True:
        begin = scanner.pos
        x = scanner.number()
        scanner.expect(",")
        y = scanner.number()
        scanner.expect(",")
        w = scanner.number()
        scanner.expect(",")
        h = scanner.number()
        rects.append(Quadruple(x=x, y=y, w=w, h=h, source=token[begin:scanner.pos]))
        if scanner.peek() != ";":
            break
        scanner.expect(";")
    scanner.finish()
    return rects


def parse_opacities(token: str) -> str:
    """Check ``o1;o2,...`` and return it unchanged."""
    scanner = _Scanner(token, "opacity keyframes")
    scanner.number()
    while scanner.peek() in (";", ","):
        scanner.pos += 1
        scanner.number()
    scanner.finish()
    return token


def _checked_number(token: str, what: str) -> str:
    parse_number(token, what)
    return token


def _parse_timing(start: str, end: str) -> TimeRange:
    return TimeRange(
        start=parse_number(start, "start time"),
        end=parse_number(end, "end time"),
    )


def parse_focus(text: str) -> FocusDirective:
    tokens = text.split()
    if len(tokens) != 3:
        raise DirectiveSyntaxError(
            f"expected '<rects> <start> <end>', got {len(tokens)} token(s)"
        )
    rects, start, end = tokens
    return FocusDirective(keyframes=parse_rects(rects), timing=_parse_timing(start, end))


def parse_highlight(text: str) -> HighlightDirective:
    tokens = text.split()
    if len(tokens) != 6:
        raise DirectiveSyntaxError(
            "expected '<rects> <color> <thickness> <opacities> <start> <end>', "
            f"got {len(tokens)} token(s)"
        )
    rects, color, thickness, opacities, start, end = tokens
    return HighlightDirective(
        rects=parse_rects(rects),
        color=color,
        thickness=_checked_number(thickness, "thickness"),
        opacity_keyframes=parse_opacities(opacities),
        timing=_parse_timing(start, end),
    )


# ---------------------------------------------------------------------------
# Lowering to SVG markup
# ---------------------------------------------------------------------------

def format_seconds(value: Decimal) -> str:
    """Seconds without trailing zeros: 2.0 -> '2s', 0.50 -> '0.5s'."""
    text = f"{value:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text}s"


def _animate(attribute: str, values: str, timing: TimeRange) -> str:
    return (
        f'<animate attributeName="{attribute}" values="{values}"'
        f' begin="{format_seconds(timing.start)}" dur="{format_seconds(timing.duration)}"'
        f' fill="freeze"/>'
    )


def lower_focus(directive: FocusDirective) -> str:
    values = ";".join(q.as_view_box() for q in directive.keyframes)
    return _animate("viewBox", values, directive.timing)


def lower_highlight(directive: HighlightDirective) -> str:
    animate = _animate("stroke-opacity", directive.opacity_keyframes, directive.timing)
    parts = []
    for rect in directive.rects:
        x, y, w, h = rect.components()
        parts.append(
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}"'
            f' rx="{HIGHLIGHT_CORNER_RADIUS}" ry="{HIGHLIGHT_CORNER_RADIUS}"'
            f' fill="transparent" stroke="{escape(directive.color)}"'
            f' stroke-width="{directive.thickness}" stroke-opacity="0">'
            f'{animate}</rect>'
        )
    return "".join(parts)


# ---------------------------------------------------------------------------
# Per-flow compilation
# ---------------------------------------------------------------------------

def _check_duration(timing: TimeRange, flow_id: str, name: str) -> None:
    if timing.duration < 0:
        raise SlideshowError(
            ErrorKind.NEGATIVE_DURATION,
            flow_id,
            f"Flow '{flow_id}': {name} ends at {timing.end}s, before it starts at {timing.start}s",
        )


def compile_focus(text: str, flow_id: str) -> str:
    """Parse, check and lower one focus directive."""
    try:
        directive = parse_focus(text)
    except DirectiveSyntaxError as e:
        raise SlideshowError(
            ErrorKind.MALFORMED_FOCUS, flow_id, f"Flow '{flow_id}': bad focus '{text}': {e}"
        ) from e
    _check_duration(directive.timing, flow_id, "focus")
    return lower_focus(directive)


def compile_highlight(text: str, flow_id: str) -> str:
    """Parse, check and lower one highlight directive."""
    try:
        directive = parse_highlight(text)
    except DirectiveSyntaxError as e:
        raise SlideshowError(
            ErrorKind.MALFORMED_HIGHLIGHT, flow_id, f"Flow '{flow_id}': bad highlight '{text}': {e}"
        ) from e
    _check_duration(directive.timing, flow_id, "highlight")
    return lower_highlight(directive)


def compile_directives(refs: list[FlowRef]) -> dict[str, CompiledDirectives]:
    """Build the qualified-id -> compiled markup mapping.

    Only flows declaring a directive get an entry.  A qualified id seen
    twice means uniqification was bypassed and aborts compilation.
    """
    mapping: dict[str, CompiledDirectives] = {}
    seen: set[str] = set()
    for ref in refs:
        flow = ref.flow
        if flow.id in seen:
            raise SlideshowError(
                ErrorKind.DUPLICATE_ID, flow.id, f"Internal error: flow id '{flow.id}' is not unique"
            )
        seen.add(flow.id)

        if flow.focus is None and flow.highlight is None:
            continue

        compiled = CompiledDirectives()
        if flow.focus is not None:
            compiled.focus = compile_focus(flow.focus, flow.id)
        if flow.highlight is not None:
            compiled.highlight = compile_highlight(flow.highlight, flow.id)
        mapping[flow.id] = compiled
        logger.debug(f"Compiled directives for {flow.id}")

    logger.info(f"Compiled directives for {len(mapping)} of {len(refs)} flows")
    return mapping
