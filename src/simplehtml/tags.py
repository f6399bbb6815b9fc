"""HTML tag descriptors and the built-in tag catalog.

A tag is anything that can produce an opening marker and, optionally, a
closing marker. Built-in tags are frozen ``Tag`` instances; callers extend
the set by passing any object that satisfies the ``HtmlTag`` protocol.

Thread Safety:
Tags are immutable and the catalog is never mutated after import.
Safe to share across threads.

Example:
    >>> from simplehtml.tags import Tag, get_tag
    >>> get_tag("p").opening_tag()
    '<p>'
    >>> Tag.void("hr").closing_tag() is None
    True

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from simplehtml.errors import UnknownTagError


@runtime_checkable
class HtmlTag(Protocol):
    """Protocol for tag descriptors.

    Implement this protocol to add tags that are not in the built-in catalog.
    Void tags (such as ``<br>``) return None from ``closing_tag()``.

    """

    def opening_tag(self) -> str:
        """Literal text emitted when the tag is opened."""
        ...

    def closing_tag(self) -> str | None:
        """Literal text emitted when the tag is closed, or None for void tags."""
        ...


@dataclass(frozen=True, slots=True)
class Tag:
    """Built-in tag descriptor.

    Attributes:
        name: Catalog name (e.g., "p", "h1")
        opening: Opening marker (e.g., "<p>")
        closing: Closing marker (e.g., "</p>"), None for void tags

    """

    name: str
    opening: str
    closing: str | None = None

    @classmethod
    def paired(cls, name: str) -> Tag:
        """Create a tag with ``<name>`` and ``</name>`` markers."""
        return cls(name, f"<{name}>", f"</{name}>")

    @classmethod
    def void(cls, name: str) -> Tag:
        """Create a tag with only a ``<name>`` marker."""
        return cls(name, f"<{name}>")

    def opening_tag(self) -> str:
        return self.opening

    def closing_tag(self) -> str | None:
        return self.closing


HTML = Tag.paired("html")
HEAD = Tag.paired("head")
BODY = Tag.paired("body")
H1 = Tag.paired("h1")
H2 = Tag.paired("h2")
H3 = Tag.paired("h3")
H4 = Tag.paired("h4")
H5 = Tag.paired("h5")
H6 = Tag.paired("h6")
P = Tag.paired("p")
PRE = Tag.paired("pre")
SPAN = Tag.paired("span")
BOLD = Tag("bold", "<b>", "</b>")
ITALIC = Tag("italic", "<i>", "</i>")
UNDERLINE = Tag("underline", "<u>", "</u>")
BREAK = Tag("break", "<br>")

HEADINGS: tuple[Tag, ...] = (H1, H2, H3, H4, H5, H6)

# Name -> tag lookup, frozen after import
TAGS: Mapping[str, Tag] = MappingProxyType(
    {
        tag.name: tag
        for tag in (
            HTML,
            HEAD,
            BODY,
            *HEADINGS,
            P,
            PRE,
            SPAN,
            BOLD,
            ITALIC,
            UNDERLINE,
            BREAK,
        )
    }
)


def get_tag(name: str) -> Tag:
    """Look up a built-in tag by name.

    Args:
        name: Catalog name, case-insensitive (e.g., "P", "h2", "bold")

    Returns:
        The matching Tag

    Raises:
        UnknownTagError: If the name is not in the catalog
    """
    try:
        return TAGS[name.lower()]
    except KeyError:
        raise UnknownTagError(name) from None


def heading(level: int) -> Tag:
    """Return the heading tag for a level between 1 and 6.

    Raises:
        ValueError: If level is outside 1..6
    """
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be between 1 and 6, got {level}")
    return HEADINGS[level - 1]


def closing_marker(tag: HtmlTag) -> str:
    """Closing marker for ``tag``, with void tags mapped to ""."""
    return tag.closing_tag() or ""


__all__ = [
    "BODY",
    "BOLD",
    "BREAK",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "HEAD",
    "HEADINGS",
    "HTML",
    "ITALIC",
    "P",
    "PRE",
    "SPAN",
    "TAGS",
    "UNDERLINE",
    "HtmlTag",
    "Tag",
    "closing_marker",
    "get_tag",
    "heading",
]
