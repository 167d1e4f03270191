"""Short walk-throughs of the stack and queue containers."""

from __future__ import annotations

from .linkedqueue import Queue
from .stack import Stack


def stack_demo() -> str:
    """Exercise a stack of words and return the text of the session."""
    stack: Stack[str] = Stack()
    lines = [f"Is stack empty? {'Yes' if stack.is_empty() else 'No'}"]

    for word in ("first", "second", "third"):
        stack.push(word)
    lines.append(stack.render())

    lines.extend(f"Popped: {stack.pop()}" for _ in range(3))
    lines.append(stack.render())

    stack.clear()
    lines.append(stack.render())
    return "\n".join(lines) + "\n"


def queue_demo() -> str:
    """Exercise a queue of numbers and return the text of the session."""
    queue: Queue[int] = Queue()
    for n in (10, 20, 30, 40):
        queue.enqueue(n)
    lines = [queue.render()]

    for _ in range(3):
        value = queue.dequeue()
        if value:
            lines.append(f"deQueue: {value}")
    lines.append(queue.render())

    queue.clear()
    queue.enqueue(100)
    lines.append(queue.render())
    return "\n".join(lines) + "\n"