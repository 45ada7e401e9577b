#!/usr/bin/env python3
"""Build a self-contained HTML slideshow from a folder of YAML + SVG files.

The folder holds a single *.yml document (flows of HTML text, each naming
an SVG by its 'id') and one <id>.svg per distinct id.  The page is written
beside the document as <document name>.html.  Nothing is written when any
check fails.

Usage:
    # Build the slideshow in the current folder:
    python scripts/build_slideshow.py

    # Build a specific folder:
    python scripts/build_slideshow.py --folder talks/intro

    # Start a new slideshow in an empty folder:
    python scripts/build_slideshow.py --folder talks/new --seed

Document:

    min: 1em                     # font size of inactive flows
    max: 2.5em                   # font size of the active flow
    sections:
    - flows:
      - html: ...                # HTML text of the flow
        seconds: 2               # seconds to animate into this flow
        id: ...                  # name of the *.svg to display
        centered: true           # optional: center the text
        focus: "0,0,1000,1000;250,250,500,500 0 2"
        highlight: "100,100,300,200 #ea4335 4 0;1 0 1"
      subsections:
      - flows:
        - ...

SVG files should be 1000px x 1000px; '--seed' writes canvases of that size.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from slideshow.errors import SlideshowError
from slideshow.pipeline import build
from slideshow.seed import seed_folder


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Build an HTML slideshow from a folder with one *.yml and its *.svg files",
        epilog=__doc__.split("Document:", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--folder", type=Path, default=Path("."),
                        help="Slideshow folder (default: current folder)")
    parser.add_argument("-s", "--seed", action="store_true",
                        help="Populate an empty folder with a starter *.yml and *.svg files")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-flow details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    print(f"Working with folder '{args.folder.resolve()}'...")

    try:
        if args.seed:
            written = seed_folder(args.folder)
            print(f"Seeded {len(written)} files:")
            for path in written:
                print(f"  {path}")
            return 0

        result_path = build(args.folder)
    except SlideshowError as e:
        print(f"Error: {e.report()}", file=sys.stderr)
        return 1

    print(f"Slideshow generated: {result_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
