"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO container whose iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def render(self) -> str:
        """Describe the contents from the top down, as one line."""
        if self.is_empty():
            return "Stack is empty"
        return "Stack: " + "".join(f"{item} " for item in self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)