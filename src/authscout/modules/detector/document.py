"""Read-only document tree over raw page markup."""

from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

logger = logging.getLogger(__name__)

# Tried in order; lxml recovers from declarations html.parser rejects.
PARSERS = ("html.parser", "lxml")


class Element:
    """A single element of a parsed document."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self) -> str:
        return f"Element(<{self.tag_name}>)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Element) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def tag_name(self) -> str:
        return (self._tag.name or "").lower()

    def attr(self, name: str, default: str = "") -> str:
        """Return an attribute value; multi-valued attributes are space-joined."""
        value = self._tag.get(name)
        if value is None:
            return default
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    @property
    def id(self) -> str:
        return self.attr("id")

    @property
    def name(self) -> str:
        return self.attr("name")

    @property
    def input_type(self) -> str:
        return self.attr("type").strip().lower()

    @property
    def text(self) -> str:
        return self._tag.get_text()

    @property
    def outer_html(self) -> str:
        return str(self._tag)

    def find_all(self, *names: str) -> list[Element]:
        """Descendant elements with any of the given tag names."""
        return [Element(t) for t in self._tag.find_all(list(names) if names else True)]

    def has_descendant(self, name: str) -> bool:
        return self._tag.find(name) is not None


def _build_soup(source_text: str) -> BeautifulSoup:
    for parser in PARSERS:
        try:
            return BeautifulSoup(source_text, parser)
        except ParserRejectedMarkup as e:
            logger.warning("Parser %s rejected markup: %s", parser, e)
    # Structural queries come back empty; lexical checks still see the raw text.
    return BeautifulSoup("", "html.parser")


class ParsedDocument:
    """Structural queries over a best-effort HTML parse."""

    def __init__(self, source_text: str):
        self.source_text = source_text or ""
        self.html_lower = self.source_text.lower()
        self._soup = _build_soup(self.source_text)

    def by_tag(self, *names: str) -> list[Element]:
        """All elements with one of the given tag names, in document order."""
        wanted = [n.lower() for n in names]
        return [Element(t) for t in self._soup.find_all(wanted)]

    def by_attr_contains(self, attr: str, needle: str, tag: str | None = None) -> list[Element]:
        """Elements whose ``attr`` contains ``needle`` (case-insensitive)."""
        needle = needle.lower()
        return [
            el
            for el in self.with_attr(attr, tag)
            if needle in el.attr(attr).lower()
        ]

    def with_attr(self, attr: str, tag: str | None = None) -> list[Element]:
        """Elements carrying ``attr`` at all, optionally restricted to ``tag``."""
        return [
            Element(t)
            for t in self._soup.find_all(tag.lower() if tag else True)
            if t.has_attr(attr)
        ]

    def matching(self, predicate: Callable[[Element], bool]) -> list[Element]:
        """Elements satisfying ``predicate``, in document order."""
        return [el for el in map(Element, self._soup.find_all(True)) if predicate(el)]


def parse_document(source_text: str) -> ParsedDocument:
    """Parse markup without ever failing on malformed input."""
    return ParsedDocument(source_text)
