"""Fluent HTML builder with a tag-stack discipline.

The builder appends opening tags, text and closing tags to a buffer while
tracking which tags are still open. Closing markers are emitted in exact
reverse order of opening, either automatically (auto-close mode) or through
explicit close calls that are checked against the most recently opened tag
(manual-close mode).

Auto-close:
    >>> from simplehtml import HtmlBuilder, tags
    >>> b = HtmlBuilder.auto_closing()
    >>> b.open(tags.HTML).open(tags.BODY).text("hi").render()
    '<html><body>hi</body></html>'

Manual-close:
    >>> b = HtmlBuilder.manual_closing()
    >>> b.p().text("a").close_p().render()
    '<p>a</p>'

Empty-stack policy:
    An explicit ``close()`` with nothing open raises EmptyStackError.
    The implicit close done by ``text()`` and the drain done by ``render()``
    are no-ops on an empty stack.

Thread Safety:
Builders are mutable and not synchronized. Use one builder per output.

"""

from __future__ import annotations

from simplehtml.config import CloseMode, get_builder_config
from simplehtml.errors import EmptyStackError, StructuralMismatchError
from simplehtml.stack import CloseStack
from simplehtml.stringbuilder import StringBuilder
from simplehtml.tags import (
    BODY,
    BOLD,
    BREAK,
    HEAD,
    HEADINGS,
    HTML,
    ITALIC,
    PRE,
    SPAN,
    UNDERLINE,
    HtmlTag,
    P,
    Tag,
    closing_marker,
    heading,
)
from simplehtml.utils.logger import get_logger
from simplehtml.utils.text import repeat_string

logger = get_logger(__name__)


class HtmlBuilder:
    """Fluent builder for balanced HTML text.

    Every non-terminal operation returns the builder so calls can be chained.
    The builder also behaves as a read-only character sequence over the
    text produced so far: ``len(b)``, ``b[i]`` and ``b[i:j]``.

    Attributes:
        close_mode: Current CloseMode; may be changed at any time

    """

    __slots__ = ("_buffer", "_pending", "_close_mode", "_space", "_nbsp")

    def __init__(self, close_mode: CloseMode | None = None) -> None:
        """Initialize an empty builder.

        Args:
            close_mode: Closing behavior. Defaults to the mode of the active
                BuilderConfig.
        """
        config = get_builder_config()
        self._buffer = StringBuilder()
        self._pending: CloseStack[str] = CloseStack()
        self.close_mode = close_mode if close_mode is not None else config.close_mode
        self._space = config.space
        self._nbsp = config.non_breaking_space

    @classmethod
    def auto_closing(cls) -> HtmlBuilder:
        """Create a builder that closes the last open tag after each ``text()``.

        Auto-closing builders also close all open tags on ``render()``.
        """
        return cls(CloseMode.AUTO)

    @classmethod
    def manual_closing(cls) -> HtmlBuilder:
        """Create a builder that only closes tags on explicit close calls."""
        return cls(CloseMode.MANUAL)

    @property
    def close_mode(self) -> CloseMode:
        """Current CloseMode; string values such as "manual" are accepted."""
        return self._close_mode

    @close_mode.setter
    def close_mode(self, value: CloseMode | str) -> None:
        self._close_mode = CloseMode(value)

    @property
    def depth(self) -> int:
        """Number of tags opened but not yet closed."""
        return len(self._pending)

    @property
    def pending(self) -> tuple[str, ...]:
        """Pending closing markers, most recently opened first."""
        return self._pending.snapshot()

    # =========================================================================
    # Core operations
    # =========================================================================

    def open(self, tag: HtmlTag) -> HtmlBuilder:
        """Write the opening marker of ``tag`` and remember its closing marker.

        Void tags push an empty marker, so they still occupy a stack slot.
        """
        self._buffer.append(tag.opening_tag())
        self._pending.push(closing_marker(tag))
        return self

    def close(self, tag: HtmlTag) -> HtmlBuilder:
        """Close ``tag``, which must be the most recently opened tag.

        The stack is only popped once the markers match, so a rejected close
        leaves the builder as it was.

        Raises:
            EmptyStackError: If no tag is open
            StructuralMismatchError: If the pending closing marker differs
                from the one ``tag`` produces
        """
        expected = closing_marker(tag)
        try:
            actual = self._pending.peek()
        except EmptyStackError:
            raise EmptyStackError(f"cannot close {expected!r}: no open tag") from None
        if actual != expected:
            logger.debug("Close mismatch: expected %r, pending %r", expected, actual)
            raise StructuralMismatchError(expected, actual)
        self._buffer.append(self._pending.pop())
        return self

    def text(self, content: str | None) -> HtmlBuilder:
        """Append ``content`` verbatim; None appends nothing.

        In auto-close mode the most recently opened tag is closed afterwards,
        without validation. Nothing happens if no tag is open.
        """
        if content is not None:
            self._buffer.append(content)
        if self.close_mode is CloseMode.AUTO and self._pending:
            self._buffer.append(self._pending.pop())
        return self

    def render(self) -> str:
        """Return the HTML produced so far.

        In auto-close mode every still-open tag is closed first, most recent
        first, leaving the stack empty. In manual-close mode open tags stay
        open and the stack is left untouched, so render may be called
        repeatedly.
        """
        if self.close_mode is CloseMode.AUTO and self._pending:
            logger.debug("Closing %d pending tag(s) on render", len(self._pending))
            self._buffer.extend(list(self._pending.drain()))
        return self._buffer.build()

    def _write(self, raw: str) -> HtmlBuilder:
        self._buffer.append(raw)
        return self

    # =========================================================================
    # Document structure
    # =========================================================================

    def html(self) -> HtmlBuilder:
        return self.open(HTML)

    def close_html(self) -> HtmlBuilder:
        return self.close(HTML)

    def head(self) -> HtmlBuilder:
        return self.open(HEAD)

    def close_head(self) -> HtmlBuilder:
        return self.close(HEAD)

    def body(self) -> HtmlBuilder:
        return self.open(BODY)

    def close_body(self) -> HtmlBuilder:
        return self.close(BODY)

    def html_and_body(self) -> HtmlBuilder:
        """Open ``<html>`` then ``<body>``."""
        return self.html().body()

    def close_body_and_html(self) -> HtmlBuilder:
        """Close ``</body>`` then ``</html>``."""
        return self.close_body().close_html()

    # =========================================================================
    # Block and inline elements
    # =========================================================================

    def h(self, level: int | Tag) -> HtmlBuilder:
        """Open a heading, given as a level 1-6 or a heading tag."""
        return self.open(_heading_tag(level))

    def close_h(self, level: int | Tag) -> HtmlBuilder:
        return self.close(_heading_tag(level))

    def p(self) -> HtmlBuilder:
        return self.open(P)

    def close_p(self) -> HtmlBuilder:
        return self.close(P)

    def pre(self) -> HtmlBuilder:
        return self.open(PRE)

    def close_pre(self) -> HtmlBuilder:
        return self.close(PRE)

    def span(self) -> HtmlBuilder:
        return self.open(SPAN)

    def close_span(self) -> HtmlBuilder:
        return self.close(SPAN)

    def bold(self) -> HtmlBuilder:
        return self.open(BOLD)

    def close_bold(self) -> HtmlBuilder:
        return self.close(BOLD)

    def italic(self) -> HtmlBuilder:
        return self.open(ITALIC)

    def close_italic(self) -> HtmlBuilder:
        return self.close(ITALIC)

    def underline(self) -> HtmlBuilder:
        return self.open(UNDERLINE)

    def close_underline(self) -> HtmlBuilder:
        return self.close(UNDERLINE)

    # =========================================================================
    # Raw writes (never push, never auto-close)
    # =========================================================================

    def br(self) -> HtmlBuilder:
        """Write a line break."""
        return self._write(BREAK.opening_tag())

    def space(self, times: int = 1) -> HtmlBuilder:
        """Write ``times`` spaces."""
        return self._write(repeat_string(self._space, times))

    def non_breaking_space(self, times: int = 1) -> HtmlBuilder:
        """Write ``times`` non-breaking spaces."""
        return self._write(repeat_string(self._nbsp, times))

    # =========================================================================
    # Character-sequence view
    # =========================================================================

    def __len__(self) -> int:
        return self._buffer.length

    def __getitem__(self, key: int | slice) -> str:
        return self._buffer[key]

    def __str__(self) -> str:
        # Same as render(): drains open tags in auto-close mode.
        return self.render()

    def __repr__(self) -> str:
        return (
            f"<HtmlBuilder mode={self.close_mode.value} "
            f"length={len(self)} depth={self.depth}>"
        )


def _heading_tag(level: int | Tag) -> Tag:
    if isinstance(level, Tag):
        if level not in HEADINGS:
            raise ValueError(f"Not a heading tag: {level.name!r}")
        return level
    if not isinstance(level, int):
        raise ValueError(f"Heading level must be an int or a heading tag, got {level!r}")
    return heading(level)
