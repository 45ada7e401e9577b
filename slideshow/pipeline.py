"""Folder-level build: find the document, compile it, write the page."""

import logging
from pathlib import Path

import yaml

from slideshow.compiler.assembler import CompiledSlideshow, compile_document
from slideshow.errors import ErrorKind, SlideshowError
from slideshow.renderer import write_page
from slideshow.schemas.document import Document, validate_document
from slideshow.utils.file_utils import find_document, load_yaml, output_path

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> Document:
    """Load a YAML slideshow document and validate it against the schema."""
    path = Path(path)
    try:
        data = load_yaml(path)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise SlideshowError(
            ErrorKind.INVALID_DOCUMENT, str(path), f"'{path}' is not valid UTF-8 YAML", details=[str(e)]
        ) from e

    errors = validate_document(data)
    if errors:
        raise SlideshowError(
            ErrorKind.INVALID_DOCUMENT, str(path), f"'{path}' failed to parse", details=errors
        )
    logger.info(f"'{path}' parsed OK")
    return Document.model_validate(data)


def compile_folder(folder: str | Path) -> tuple[Path, CompiledSlideshow]:
    """Compile the slideshow in ``folder`` without writing anything."""
    document_path = find_document(folder)
    document = load_document(document_path)
    return document_path, compile_document(document, document_path.parent)


def build(folder: str | Path) -> Path:
    """Build ``<folder>/<document name>.html`` from the folder's document and SVGs.

    The page is only written once every pass has succeeded.
    """
    document_path, compiled = compile_folder(folder)
    return write_page(compiled, output_path(document_path), title=document_path.stem)
