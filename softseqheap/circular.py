"""Circular list used for corruption sets and witness sets."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class CircularList:
    """An ordered ring of values read from its front.

    Splicing another ring in keeps the ring structure intact but moves the
    read position: the first spliced item becomes the new last item, so
    the remaining spliced items are read first.
    """

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def append(self, value: Any) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def splice(self, other: CircularList) -> None:
        """Link every item of ``other`` into this ring and empty ``other``."""
        if not other._items:
            return
        if not self._items:
            self._items, other._items = other._items, deque()
            return
        moved = other._items
        other._items = deque()
        head = moved.popleft()
        # The ring is closed after the spliced items, and its last item is
        # the first spliced one.
        moved.extend(self._items)
        moved.append(head)
        self._items = moved

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if not self._items:
            raise IndexError("circular list is empty")
        return self._items[0]

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("pop from an empty circular list")
        return self._items.popleft()

    def drain(self) -> list[Any]:
        """Return all values front to back and leave the list empty."""
        values = list(self._items)
        self._items.clear()
        return values

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __str__(self) -> str:
        return "{" + ", ".join(str(value) for value in self._items) + "}"

    def __repr__(self) -> str:
        return f"CircularList({list(self._items)!r})"