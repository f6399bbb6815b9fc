"""
simplehtml — fluent builder for balanced HTML text

Appends opening tags, text and closing tags to a buffer while tracking which
tags are still open, so closing is either automatic or validated.

Quick Start:
    >>> from simplehtml import HtmlBuilder
    >>> HtmlBuilder.auto_closing().html_and_body().h(1).text("Title").render()
    '<html><body><h1>Title</h1></body></html>'

    >>> b = HtmlBuilder.manual_closing()
    >>> b.p().bold().text("bold").close_bold().close_p().render()
    '<p><b>bold</b></p>'

Custom Tags:
    >>> from simplehtml import Tag
    >>> HtmlBuilder.auto_closing().open(Tag.paired("em")).text("x").render()
    '<em>x</em>'
"""

from simplehtml import tags
from simplehtml.builder import HtmlBuilder
from simplehtml.config import (
    BuilderConfig,
    CloseMode,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from simplehtml.errors import (
    EmptyStackError,
    SimpleHtmlError,
    StructuralMismatchError,
    UnknownTagError,
)
from simplehtml.stack import CloseStack
from simplehtml.tags import HtmlTag, Tag, get_tag
from simplehtml.utils.text import repeat_string

__version__ = "0.1.0"


def auto_closing() -> HtmlBuilder:
    """Create an auto-closing HtmlBuilder."""
    return HtmlBuilder.auto_closing()


def manual_closing() -> HtmlBuilder:
    """Create a manual-closing HtmlBuilder."""
    return HtmlBuilder.manual_closing()


__all__ = [
    "BuilderConfig",
    "CloseMode",
    "CloseStack",
    "EmptyStackError",
    "HtmlBuilder",
    "HtmlTag",
    "SimpleHtmlError",
    "StructuralMismatchError",
    "Tag",
    "UnknownTagError",
    "__version__",
    "auto_closing",
    "builder_config_context",
    "get_builder_config",
    "get_tag",
    "manual_closing",
    "repeat_string",
    "reset_builder_config",
    "set_builder_config",
    "tags",
]
