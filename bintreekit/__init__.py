"""Binary-tree notation checks, text helpers, and a small stack and queue."""

__version__ = "0.1.0"
__all__ = ["bintree", "demo", "linkedqueue", "stack", "text"]