from .uniqify import FlowPath, FlowRef, flatten, uniqify, root_ids, rebuild
from .directives import compile_focus, compile_highlight, compile_directives
from .transforms import center, strip_directives
from .assets import asset_path, resolve_assets, extract_body, wrap_body, build_fragments
from .assembler import CompiledSlideshow, compile_document

__all__ = [
    "FlowPath",
    "FlowRef",
    "flatten",
    "uniqify",
    "root_ids",
    "rebuild",
    "compile_focus",
    "compile_highlight",
    "compile_directives",
    "center",
    "strip_directives",
    "asset_path",
    "resolve_assets",
    "extract_body",
    "wrap_body",
    "build_fragments",
    "CompiledSlideshow",
    "compile_document",
]
