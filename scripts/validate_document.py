#!/usr/bin/env python3
"""Validate a slideshow YAML document and its focus/highlight directives.

Checks the document against the schema, then compiles every directive,
without touching SVG files or writing output.

Usage:
    python scripts/validate_document.py <yaml_file>
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from slideshow.compiler.directives import compile_directives
from slideshow.compiler.uniqify import root_ids, uniqify
from slideshow.errors import SlideshowError
from slideshow.pipeline import load_document


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate a slideshow YAML document")
    parser.add_argument("yaml_file", type=Path, help="Path to the *.yml document")
    args = parser.parse_args(argv)

    if not args.yaml_file.exists():
        print(f"Error: YAML file not found: {args.yaml_file}", file=sys.stderr)
        return 1

    try:
        document = load_document(args.yaml_file)
        refs = uniqify(document)
        mapping = compile_directives(refs)
    except SlideshowError as e:
        print(f"Validation FAILED: {args.yaml_file}", file=sys.stderr)
        print(f"  Error: {e.report()}", file=sys.stderr)
        return 1

    print(f"Validation PASSED: {args.yaml_file}")
    print(f"  Sections: {len(document.sections)}")
    print(f"  Flows: {len(refs)}")
    print(f"  SVG files referenced: {len(root_ids(refs))}")
    print(f"  Flows with animations: {len(mapping)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
