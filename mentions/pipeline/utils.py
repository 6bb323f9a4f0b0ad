"""Helpers for moving between HTML strings and BeautifulSoup fragments."""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter


class SourceOrderFormatter(HTMLFormatter):
    """BeautifulSoup's "minimal" formatter, minus the attribute sorting.

    Attributes are written in the order they were parsed or assigned, so
    untouched markup serialises back the way it came in.
    """

    def __init__(self):
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FORMATTER = SourceOrderFormatter()


def parse_fragment(html: str) -> BeautifulSoup:
    """Parse an HTML fragment. No <html>/<body> wrapper is added."""
    return BeautifulSoup(html or "", "html.parser")


def to_document(doc) -> Tag:
    """Return ``doc`` as a fragment, parsing it if it is still a string."""
    if isinstance(doc, Tag):
        return doc
    return parse_fragment(doc)


def to_html(doc) -> str:
    """Serialise a fragment back to HTML. Plain strings are returned unchanged.

    Text nodes are escaped (``&``, ``<`` and ``>``); tags are written
    literally with their attributes in source order.
    """
    if doc is None:
        return ""
    if isinstance(doc, Tag):
        return doc.decode(formatter=FORMATTER)
    return str(doc)


def is_text_node(node) -> bool:
    """True for text content, False for comments, doctypes, CDATA and the like."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def has_ancestor(node, names) -> bool:
    """Check whether any enclosing element of ``node`` is one of ``names``."""
    current = node.parent
    while current is not None:
        if isinstance(current, Tag) and current.name in names:
            return True
        current = current.parent
    return False


def tag_factory(doc) -> BeautifulSoup:
    """Return the soup that should create new tags for ``doc``.

    Fragments handed in as a sub-tree still belong to a soup; a detached
    tag gets a fresh, empty one.
    """
    current = doc
    while current is not None:
        if isinstance(current, BeautifulSoup):
            return current
        current = current.parent
    return BeautifulSoup("", "html.parser")
