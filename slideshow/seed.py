"""Populate an empty folder with a starter slideshow.

The starter document references two 1000x1000 SVG canvases; each canvas
holds a transparent guide rectangle covering the whole drawing area.
"""

import logging
from pathlib import Path

from slideshow.compiler.assets import asset_path
from slideshow.errors import ErrorKind, SlideshowError
from slideshow.utils.file_utils import DOCUMENT_SUFFIX, is_folder_empty, require_folder, save_yaml

logger = logging.getLogger(__name__)

SEED_NAME = "slideshow"

CANVAS_SVG = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="1000" height="1000" viewBox="0 0 1000 1000">
  <rect x="0" y="0" width="1000" height="1000" fill="transparent" stroke="none"/>
  <text x="500" y="500" font-size="64" text-anchor="middle">{label}</text>
</svg>
"""

SEED_DOCUMENT = {
    "min": "1em",
    "max": "2.5em",
    "svgPaneBackgroundColor": "#ffffff",
    "textPaneBackgroundColor": "#f4f4f4",
    "sections": [
        {
            "flows": [
                {
                    "html": "<b>Welcome.</b> This flow shows <i>intro.svg</i>.",
                    "seconds": 2,
                    "id": "intro",
                    "centered": True,
                },
                {
                    "html": "The same SVG again, zooming into its centre.",
                    "seconds": 2,
                    "id": "intro",
                    "focus": "0,0,1000,1000;250,250,500,500 0 2",
                },
            ],
            "subsections": [
                {
                    "flows": [
                        {
                            "html": "A sub-flow highlighting two regions of <i>detail.svg</i>.",
                            "seconds": 2,
                            "id": "detail",
                            "highlight": "100,100,300,200;600,600,300,200 #ea4335 4 0;1 0 1",
                        },
                    ],
                },
            ],
        },
    ],
}


def seed_folder(folder: str | Path) -> list[Path]:
    """Write the starter document and its SVGs into an empty folder."""
    folder = require_folder(folder)
    if not is_folder_empty(folder):
        raise SlideshowError(
            ErrorKind.FOLDER_NOT_EMPTY, str(folder), f"Folder '{folder}' should be empty before seeding"
        )

    document_path = folder / f"{SEED_NAME}{DOCUMENT_SUFFIX}"
    save_yaml(SEED_DOCUMENT, document_path)
    written = [document_path]

    for root_id in ("intro", "detail"):
        path = asset_path(folder, root_id)
        path.write_text(CANVAS_SVG.format(label=root_id), encoding="utf-8")
        written.append(path)

    logger.info(f"Seeded {folder} with {len(written)} files")
    return written
