"""Exception classes for simplehtml.

Provides standardized exceptions for the builder's tag-stack discipline.
Each exception also derives from the closest built-in exception so callers
that only know the standard library can still catch it.
"""

from __future__ import annotations


class SimpleHtmlError(Exception):
    """Base exception for all simplehtml errors.
    
    Subclass this for specific error categories.
    """

    pass


class StructuralMismatchError(SimpleHtmlError, ValueError):
    """A close request did not match the most recently opened tag.
    
    Raised by an explicit close when the closing marker at the top of the
    pending stack differs from the one the caller asked to close, which
    means open and close calls were issued out of LIFO order.
    """

    def __init__(self, expected: str, actual: str) -> None:
        """Initialize mismatch error.
        
        Args:
            expected: Closing marker the caller asked for (e.g., "</span>")
            actual: Closing marker that was actually pending (e.g., "</p>")
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"HTML not valid! Expected tag: {expected!r}, actual: {actual!r}")


class EmptyStackError(SimpleHtmlError, IndexError):
    """A close marker was requested while no tag is open."""

    def __init__(self, message: str = "no open tag to close") -> None:
        super().__init__(message)


class UnknownTagError(SimpleHtmlError, KeyError):
    """A tag name is not part of the built-in catalog."""

    def __init__(self, name: str) -> None:
        """Initialize unknown tag error.
        
        Args:
            name: The tag name that failed to resolve
        """
        self.name = name
        super().__init__(f"Unknown tag: {name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
