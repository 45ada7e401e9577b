"""Render a compiled slideshow into a single self-contained HTML page.

The page is a fixed skeleton with five substitution points: the title, the
style tokens derived from the document, the wrapped SVG fragments, the
narration JSON and the compiled-animation JSON.  The document's style
settings are injected as CSS custom properties so the skeleton's stylesheet
only ever refers to ``var(--token-name)``.
"""

import logging
import re
from html import escape
from pathlib import Path

from slideshow.compiler.assembler import CompiledSlideshow
from slideshow.schemas.document import Document

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Document settings -> CSS custom properties
# ---------------------------------------------------------------------------

def generate_style_tokens_css(document: Document) -> str:
    tokens = {
        "--min-font-size": document.min_size,
        "--max-font-size": document.max_size,
        "--svg-pane-bg": document.svg_pane_background_color or "#ffffff",
        "--text-pane-bg": document.text_pane_background_color or "#ffffff",
        "--top-border": document.top_border or "none",
        "--bottom-border": document.bottom_border or "none",
        "--left-border": document.left_border or "none",
        "--right-border": document.right_border or "none",
    }
    lines = [f"  {name}: {value};" for name, value in tokens.items()]
    return ":root {\n" + "\n".join(lines) + "\n}"


def body_classes(document: Document) -> str:
    classes = []
    if document.flip_panes:
        classes.append("flipped")
    if document.landscape_only:
        classes.append("landscape-only")
    return " ".join(classes)


# ---------------------------------------------------------------------------
# Page skeleton
# ---------------------------------------------------------------------------

BASE_CSS = """\
* { box-sizing: border-box; }
html, body { margin: 0; height: 100%; overflow: hidden; font-family: sans-serif; }
main {
  display: flex; flex-direction: row; height: 100%;
  border-top: var(--top-border); border-bottom: var(--bottom-border);
  border-left: var(--left-border); border-right: var(--right-border);
}
body.flipped main { flex-direction: row-reverse; }
#svg-pane { flex: 1 1 50%; position: relative; background: var(--svg-pane-bg); }
#text-pane { flex: 1 1 50%; overflow-y: auto; padding: 1em; background: var(--text-pane-bg); }
.flow-svg { display: none; position: absolute; inset: 0; }
.flow-svg.active { display: block; }
.flow-svg > svg { width: 100%; height: 100%; }
.flow { font-size: var(--min-font-size); opacity: 0.5; cursor: pointer; margin: 0.5em 0; }
.flow.active { font-size: var(--max-font-size); opacity: 1; }
.centered { text-align: center; }
.rotate-notice { display: none; }
@media (orientation: portrait) {
  main { flex-direction: column; }
  body.flipped main { flex-direction: column-reverse; }
  body.landscape-only main { display: none; }
  body.landscape-only .rotate-notice {
    display: flex; height: 100%; align-items: center; justify-content: center;
  }
}"""

PLAYER_JS = """\
(function () {
  var flows = [];
  NARRATION.sections.forEach(function (section) {
    section.flows.forEach(function (f) { flows.push(f); });
    (section.subsections || []).forEach(function (sub) {
      sub.flows.forEach(function (f) { flows.push(f); });
    });
  });

  var textPane = document.getElementById("text-pane");
  flows.forEach(function (flow, i) {
    var el = document.createElement("div");
    el.className = "flow";
    el.id = "text-" + flow.id;
    el.innerHTML = flow.html;
    el.style.transition = "font-size " + flow.seconds + "s, opacity " + flow.seconds + "s";
    el.addEventListener("click", function () { show(i); });
    textPane.appendChild(el);
  });

  var current = -1;
  var injected = [];

  function rootOf(id) { return id.slice(0, id.lastIndexOf("__")); }

  function inject(svg, markup) {
    var before = svg.childNodes.length;
    svg.insertAdjacentHTML("beforeend", markup);
    injected = injected.concat(Array.prototype.slice.call(svg.childNodes, before));
  }

  function show(i) {
    if (i < 0 || i >= flows.length) return;
    current = i;
    var flow = flows[i];
    injected.forEach(function (n) { n.remove(); });
    injected = [];
    document.querySelectorAll(".flow.active, .flow-svg.active").forEach(function (el) {
      el.classList.remove("active");
    });
    var text = document.getElementById("text-" + flow.id);
    text.classList.add("active");
    text.scrollIntoView({ behavior: "smooth", block: "center" });
    var pane = document.getElementById(rootOf(flow.id));
    pane.classList.add("active");
    var svg = pane.querySelector("svg");
    var compiled = ANIMATIONS[flow.id] || {};
    if (compiled.focus) inject(svg, compiled.focus);
    if (compiled.highlight) inject(svg, compiled.highlight);
    if (svg.setCurrentTime) svg.setCurrentTime(0);
  }

  document.addEventListener("keydown", function (e) {
    if (e.key === "ArrowRight" || e.key === "ArrowDown" || e.key === " ") show(current + 1);
    if (e.key === "ArrowLeft" || e.key === "ArrowUp") show(current - 1);
  });
  show(0);
})();"""

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{title}}</title>
<style>
{{style}}
</style>
</head>
<body class="{{body_class}}">
<div class="rotate-notice">Please rotate your device to landscape.</div>
<main>
<div id="svg-pane">
{{fragments}}
</div>
<div id="text-pane"></div>
</main>
<script>
var NARRATION = {{narration}};
var ANIMATIONS = {{mapping}};
{{player}}
</script>
</body>
</html>
"""

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def _script_safe(payload: str) -> str:
    # JSON embedded in <script> must not close the element early.
    return payload.replace("</", "<\\/")


def render_page(compiled: CompiledSlideshow, title: str) -> str:
    """Substitute the compiled payloads into the page skeleton."""
    values = {
        "title": escape(title),
        "style": "\n\n".join([generate_style_tokens_css(compiled.document), BASE_CSS]),
        "body_class": body_classes(compiled.document),
        "fragments": compiled.fragments,
        "narration": _script_safe(compiled.narration),
        "mapping": _script_safe(compiled.mapping),
        "player": PLAYER_JS,
    }
    # Single pass so substituted content is never scanned for placeholders.
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], PAGE_TEMPLATE)


def write_page(compiled: CompiledSlideshow, path: str | Path, title: str) -> Path:
    """Render and write the page in one write."""
    path = Path(path)
    html_str = render_page(compiled, title)
    path.write_text(html_str, encoding="utf-8")
    logger.info(f"Wrote {path} ({len(html_str)} characters)")
    return path
