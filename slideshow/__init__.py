"""Compile a YAML slideshow description and its SVG assets into one HTML page."""

__version__ = "0.1.0"
