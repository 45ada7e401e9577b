"""Resolve flow ids to SVG files and extract their embeddable bodies."""

import logging
import re
from pathlib import Path

from slideshow.errors import ErrorKind, SlideshowError

logger = logging.getLogger(__name__)

ASSET_SUFFIX = ".svg"

# Outermost <svg ...> ... </svg>: greedy, across lines, first match only.
_SVG_BODY = re.compile(r"<svg.*</svg>", re.DOTALL)


def asset_path(folder: str | Path, root_id: str) -> Path:
    return Path(folder) / f"{root_id}{ASSET_SUFFIX}"


def resolve_assets(folder: str | Path, root_ids: list[str]) -> list[Path]:
    """Map each root id to its SVG path, failing if any file is missing.

    All missing paths are reported together, each once, in first-seen order.
    """
    paths = [asset_path(folder, root_id) for root_id in dict.fromkeys(root_ids)]
    missing = [str(p.resolve()) for p in paths if not p.exists()]
    if missing:
        for m in missing:
            logger.error(f"SVG file referenced but not found: {m}")
        raise SlideshowError(
            ErrorKind.MISSING_ASSETS,
            str(folder),
            f"Not all SVG files referenced by the slideshow are present in '{folder}'",
            details=missing,
        )
    return paths


def extract_body(text: str, name: str) -> str:
    """Return the outermost <svg>...</svg> element of an SVG document.

    Drops the XML prolog, doctype and comments outside the root element.
    """
    match = _SVG_BODY.search(text)
    if match is None:
        raise SlideshowError(
            ErrorKind.MISSING_SVG_BODY, name, f"No <svg>...</svg> element found in '{name}'"
        )
    return match.group()


def read_asset(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SlideshowError(
            ErrorKind.UNREADABLE_ASSET, path.name, f"'{path.name}' is not UTF-8 text: {e}"
        ) from e


def wrap_body(root_id: str, body: str) -> str:
    return f'<div id="{root_id}" class="flow-svg">\n{body}\n</div>'


def build_fragments(folder: str | Path, root_ids: list[str]) -> str:
    """Resolve, read, extract and wrap every asset, joined by blank lines."""
    unique_ids = list(dict.fromkeys(root_ids))
    paths = resolve_assets(folder, unique_ids)
    fragments = []
    for root_id, path in zip(unique_ids, paths):
        body = extract_body(read_asset(path), path.name)
        fragments.append(wrap_body(root_id, body))
        logger.debug(f"Embedded {path.name} ({len(body)} characters)")
    logger.info(f"Embedded {len(fragments)} SVG file(s) from {folder}")
    return "\n\n".join(fragments)
