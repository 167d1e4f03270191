"""Helpers that normalise raw tree text before it is examined."""

from __future__ import annotations

# The characters the C locale classifies as white space.
_C_WHITESPACE = frozenset(" \t\n\v\f\r")


def erase_space_eol(text: str) -> str:
    """Return ``text`` with every blank and newline removed."""
    return "".join(ch for ch in text if ch not in (" ", "\n"))


def strip_whitespace(text: str) -> str:
    """Return ``text`` with every white-space character removed."""
    return "".join(ch for ch in text if ch not in _C_WHITESPACE)


def parens_balanced(text: str) -> bool:
    """Tell whether the parentheses in ``text`` open and close in matching pairs."""
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0