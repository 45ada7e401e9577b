"""Error taxonomy for the slideshow compiler.

Every fatal condition is raised as a SlideshowError carrying a discriminated
kind and the offending flow, asset or path.  Callers (the CLI scripts) decide
how to report it and exit; nothing in the package terminates the process.
"""

from enum import Enum
from typing import Iterable, Optional


class ErrorKind(str, Enum):
    """Discriminates the fatal conditions raised while compiling."""

    # Input errors: the author fixes the source folder and re-runs.
    MALFORMED_FOCUS = "malformed_focus"
    MALFORMED_HIGHLIGHT = "malformed_highlight"
    NEGATIVE_DURATION = "negative_duration"
    MISSING_ASSETS = "missing_assets"
    MISSING_SVG_BODY = "missing_svg_body"
    UNREADABLE_ASSET = "unreadable_asset"
    INVALID_DOCUMENT = "invalid_document"
    FOLDER_NOT_FOUND = "folder_not_found"
    NO_SINGLE_DOCUMENT = "no_single_document"
    FOLDER_NOT_EMPTY = "folder_not_empty"

    # Internal consistency: should never happen with correct uniqification.
    DUPLICATE_ID = "duplicate_id"

    @property
    def is_internal(self) -> bool:
        return self is ErrorKind.DUPLICATE_ID


class SlideshowError(Exception):
    """A fatal compilation error.

    Attributes:
        kind: Which fatal condition was hit.
        subject: The flow id, asset name or path the error is about.
        details: Extra lines for the report (missing paths, schema errors).
    """

    def __init__(
        self,
        kind: ErrorKind,
        subject: str,
        message: str,
        details: Optional[Iterable[str]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.subject = subject
        self.details = list(details or [])

    def report(self) -> str:
        """Human-readable multi-line report for the command line."""
        lines = [str(self)]
        lines.extend(f"  {d}" for d in self.details)
        return "\n".join(lines)
