"""
Document query capability used by the metadata analyzer.

The analyzer only ever needs a handful of lookups on the document head, so it
talks to this narrow interface instead of a parser directly. ``SoupDocument``
is the BeautifulSoup-backed implementation used in production.
"""

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup
from bs4.element import Tag


class Node(ABC):
    """A single element that supports CSS-selector lookups."""

    @abstractmethod
    def select_first(self, selector: str) -> "Node | None":
        """Return the first descendant matching ``selector``, or None."""

    @abstractmethod
    def attr(self, name: str) -> str:
        """Return the attribute value, or an empty string when it is absent."""

    @abstractmethod
    def text(self) -> str:
        """Return the element's text with whitespace runs collapsed to single spaces."""

    @abstractmethod
    def inner_html(self) -> str:
        """Return the element's inner content without re-serializing it."""


class Document(ABC):
    """A parsed HTML document."""

    @abstractmethod
    def head(self) -> Node | None:
        """Return the <head> element, or None if the document has none."""


class SoupNode(Node):
    """Node backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def select_first(self, selector: str) -> Node | None:
        found = self._tag.select_one(selector)
        return SoupNode(found) if found is not None else None

    def attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        # Multi-valued attributes (rel, class) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self) -> str:
        return " ".join(self._tag.get_text().split())

    def inner_html(self) -> str:
        return self._tag.decode_contents()


class SoupDocument(Document):
    """Document backed by a BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def head(self) -> Node | None:
        head = self._soup.head
        return SoupNode(head) if head is not None else None


def parse_document(html: str | bytes) -> SoupDocument:
    """Parse raw HTML with the lxml parser."""
    return SoupDocument(BeautifulSoup(html, "lxml"))
