from .document import Flow, Subsection, Section, Document, validate_document
from .directives import Quadruple, TimeRange, FocusDirective, HighlightDirective, CompiledDirectives

__all__ = [
    "Flow",
    "Subsection",
    "Section",
    "Document",
    "validate_document",
    "Quadruple",
    "TimeRange",
    "FocusDirective",
    "HighlightDirective",
    "CompiledDirectives",
]
