"""Flatten the section tree and give every flow a document-unique id.

Author ids name SVG assets and may repeat (one SVG shown for several
flows).  Each flow gets a qualified id ``<root>__<ordinal>``, the ordinal
counting from 1 over the document in traversal order: a section's own flows,
then its subsections' flows, then the next section.

The passes after this one work on the flat list of FlowRef; ``rebuild``
threads the transformed flows back into a copy of the nested document.
"""

import logging
from typing import NamedTuple, Optional

from slideshow.schemas.document import Document, Flow

logger = logging.getLogger(__name__)

QUALIFIER = "__"


class FlowPath(NamedTuple):
    """Position of a flow in the document tree."""

    section: int
    subsection: Optional[int]
    flow: int


class FlowRef(NamedTuple):
    """A flow together with where it lives and which asset it shows."""

    path: FlowPath
    root_id: str
    flow: Flow


def flatten(document: Document) -> list[FlowRef]:
    """Return every flow of the document in traversal order."""
    refs: list[FlowRef] = []
    for s, section in enumerate(document.sections):
        for i, flow in enumerate(section.flows):
            refs.append(FlowRef(FlowPath(s, None, i), flow.id, flow))
        for sub, subsection in enumerate(section.subsections or []):
            for i, flow in enumerate(subsection.flows):
                refs.append(FlowRef(FlowPath(s, sub, i), flow.id, flow))
    return refs


def qualify(root_id: str, ordinal: int) -> str:
    return f"{root_id}{QUALIFIER}{ordinal}"


def root_of(qualified_id: str) -> str:
    """Inverse of ``qualify``: strip the trailing ``__<ordinal>``."""
    return qualified_id.rsplit(QUALIFIER, 1)[0]


def uniqify(document: Document) -> list[FlowRef]:
    """Flatten the document and replace each flow id with its qualified id.

    The input document is not modified; returned refs hold copies of the
    flows.  ``root_id`` on each ref keeps the author's original id.
    """
    refs = [
        ref._replace(flow=ref.flow.model_copy(update={"id": qualify(ref.root_id, n)}))
        for n, ref in enumerate(flatten(document), start=1)
    ]
    logger.debug(f"Assigned {len(refs)} qualified flow ids")
    return refs


def root_ids(refs: list[FlowRef]) -> list[str]:
    """Distinct root ids in first-seen order."""
    return list(dict.fromkeys(ref.root_id for ref in refs))


def rebuild(document: Document, refs: list[FlowRef]) -> Document:
    """Copy the document with each flow replaced by the one on its ref."""
    rebuilt = document.model_copy(deep=True)
    for ref in refs:
        section = rebuilt.sections[ref.path.section]
        if ref.path.subsection is None:
            flows = section.flows
        else:
            flows = section.subsections[ref.path.subsection].flows
        flows[ref.path.flow] = ref.flow
    return rebuilt
