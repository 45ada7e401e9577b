"""File I/O and path utilities."""

import logging
from pathlib import Path
from typing import Any

import yaml

from slideshow.errors import ErrorKind, SlideshowError

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".yml"
OUTPUT_SUFFIX = ".html"


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_yaml(path: str | Path) -> Any:
    """Load a YAML file and return its contents."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def save_yaml(data: dict[str, Any], path: str | Path) -> None:
    """Save a dict to a YAML file."""
    path = Path(path)
    ensure_directory(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def is_folder_empty(folder: str | Path) -> bool:
    return not any(Path(folder).iterdir())


def require_folder(folder: str | Path) -> Path:
    folder = Path(folder)
    if not folder.is_dir():
        raise SlideshowError(
            ErrorKind.FOLDER_NOT_FOUND, str(folder), f"Folder '{folder}' doesn't exist"
        )
    return folder


def find_document(folder: str | Path) -> Path:
    """Return the single *.yml file in a slideshow folder.

    The extension match is case-insensitive; zero or several matches is an
    error since the output is named after the document.
    """
    folder = require_folder(folder)
    matches = sorted(p for p in folder.iterdir() if p.is_file() and p.suffix.lower() == DOCUMENT_SUFFIX)
    if len(matches) != 1:
        raise SlideshowError(
            ErrorKind.NO_SINGLE_DOCUMENT,
            str(folder),
            f"Folder '{folder}' must have a single {DOCUMENT_SUFFIX} file, found {len(matches)}",
            details=[m.name for m in matches],
        )
    logger.debug(f"Found slideshow document {matches[0]}")
    return matches[0]


def output_path(document_path: str | Path) -> Path:
    """The page is written beside the document, with the same base name."""
    return Path(document_path).with_suffix(OUTPUT_SUFFIX)
