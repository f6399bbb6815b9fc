"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

Read access (indexing, slicing) compacts the parts into a single string
first, so repeated reads between appends do not re-join.

Thread Safety:
StringBuilder instances are owned by a single HtmlBuilder.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient append-only string accumulator.
    
    Appends to a list, joins once at the end.
    O(n) total vs O(n²) for repeated string concatenation.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb = sb.append("<h1>").append("Hello").append("</h1>")
            >>> sb.build()
            '<h1>Hello</h1>'
            >>> sb.length
            14
    
    """

    __slots__ = ("_parts", "_length")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def extend(self, strings: list[str]) -> StringBuilder:
        """Append multiple strings at once.

        Args:
            strings: List of strings to append

        Returns:
            self for method chaining
        """
        for s in strings:
            self.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return self._compact()

    def _compact(self) -> str:
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    @property
    def length(self) -> int:
        """Total number of characters appended so far."""
        return self._length

    def __getitem__(self, key: int | slice) -> str:
        """Character or substring of the accumulated text.

        Follows ``str`` indexing semantics, including negative indices
        and IndexError for out-of-range integer keys.
        """
        return self._compact()[key]

    def __len__(self) -> int:
        """Return total number of characters, same as ``length``."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any text has been appended."""
        return self._length > 0
