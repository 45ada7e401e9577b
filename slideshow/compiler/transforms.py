"""Per-flow rewrites applied after uniqification."""

from slideshow.schemas.document import Flow

CENTERING_OPEN = '<div class="centered">'
CENTERING_CLOSE = "</div>"


def center(flow: Flow) -> Flow:
    """Wrap the flow's HTML in the centering container when ``centered`` is set."""
    if not flow.centered:
        return flow
    return flow.model_copy(update={"html": f"{CENTERING_OPEN}{flow.html}{CENTERING_CLOSE}"})


def strip_directives(flow: Flow) -> Flow:
    # Compiled markup travels in the directive mapping, never in the narration.
    if flow.focus is None and flow.highlight is None:
        return flow
    return flow.model_copy(update={"focus": None, "highlight": None})
