"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """A FIFO container: items enter at the rear and leave from the front."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Queue Empty!")
        return self._items.popleft()

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def render(self) -> str:
        """Describe the contents, one indexed line per item from the front."""
        if self.is_empty():
            return "Queue Empty!"
        return "\n".join(f"[{i}] {item}" for i, item in enumerate(self))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)