"""Evidence snippet truncation and deduplication."""

from collections.abc import Iterable

from .document import Element

ELLIPSIS = "..."
SNIPPET_LIMIT = 600
SHORT_SNIPPET_LIMIT = 300


def truncate(markup: str, limit: int = SNIPPET_LIMIT, marker: bool = True) -> str:
    """Cap ``markup`` at ``limit`` characters, appending ``...`` when cut."""
    if len(markup) <= limit:
        return markup
    return markup[:limit] + (ELLIPSIS if marker else "")


def unique_elements(elements: Iterable[Element]) -> list[Element]:
    """Drop elements whose outer markup was already seen; first one wins."""
    seen: set[str] = set()
    kept: list[Element] = []
    for element in elements:
        markup = element.outer_html
        if markup in seen:
            continue
        seen.add(markup)
        kept.append(element)
    return kept


def script_rendered_placeholder(what: str) -> str:
    """Evidence text for a finding inferred from raw markup only."""
    return f"[script-rendered] {what} referenced in page source but not present in static markup"
