"""LIFO stack of pending closing markers.

Every opened tag pushes its closing marker; closing pops it again. The
stack only ever grows and shrinks at one end, so the markers come back
out in exact reverse order of opening.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from simplehtml.errors import EmptyStackError

T = TypeVar("T")


class CloseStack(Generic[T]):
    """Last-in-first-out stack of closing markers.

    The marker type is opaque to the stack; the builder stores strings.

    Usage:
            >>> stack = CloseStack[str]()
            >>> stack.push("</html>")
            >>> stack.push("</body>")
            >>> list(stack.drain())
            ['</body>', '</html>']

    Thread Safety:
        Not synchronized. Owned by a single builder.

    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the most recently pushed item.

        Raises:
            EmptyStackError: If the stack is empty
        """
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> T:
        """Return the most recently pushed item without removing it.

        Raises:
            EmptyStackError: If the stack is empty
        """
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def drain(self) -> Iterator[T]:
        """Pop every item, most recent first."""
        while self._items:
            yield self._items.pop()

    def snapshot(self) -> tuple[T, ...]:
        """Current items, most recent first."""
        return tuple(reversed(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
