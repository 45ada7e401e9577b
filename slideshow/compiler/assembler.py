"""Run the compiler passes over a document and assemble the page payloads.

Pass order:

1. uniqify      -- qualified ids, flat list of flows
2. assets       -- resolve every root id, extract and wrap the SVG bodies
3. directives   -- compile focus/highlight into the id -> markup mapping
4. centering    -- wrap centered flows' HTML
5. strip        -- drop focus/highlight from the narration tree

Everything is read and compiled before anything is returned, so a failure
at any pass leaves no partial output behind.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from slideshow.compiler.assets import build_fragments
from slideshow.compiler.directives import compile_directives
from slideshow.compiler.transforms import center, strip_directives
from slideshow.compiler.uniqify import rebuild, root_ids, uniqify
from slideshow.schemas.directives import CompiledDirectives
from slideshow.schemas.document import Document

logger = logging.getLogger(__name__)


class CompiledSlideshow(BaseModel):
    """Everything the page renderer needs."""

    document: Document
    fragments: str
    narration: str
    mapping: str


def serialize_mapping(mapping: dict[str, CompiledDirectives]) -> str:
    payload = {qid: compiled.model_dump(exclude_none=True) for qid, compiled in mapping.items()}
    return json.dumps(payload, ensure_ascii=False)


def serialize_narration(document: Document) -> str:
    return json.dumps(document.to_payload(), ensure_ascii=False)


def compile_document(document: Document, folder: str | Path) -> CompiledSlideshow:
    """Compile a validated document whose SVG assets live in ``folder``."""
    refs = uniqify(document)
    fragments = build_fragments(folder, root_ids(refs))
    mapping = compile_directives(refs)

    refs = [ref._replace(flow=strip_directives(center(ref.flow))) for ref in refs]
    narration = rebuild(document, refs)

    logger.info(
        f"Compiled {len(refs)} flows in {len(document.sections)} sections, "
        f"{len(mapping)} with animations"
    )
    return CompiledSlideshow(
        document=narration,
        fragments=fragments,
        narration=serialize_narration(narration),
        mapping=serialize_mapping(mapping),
    )
