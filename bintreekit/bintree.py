"""Decide whether a parenthesised tree description is a binary tree.

A tree is written as ``(A(BC))``: each parenthesised group is one level,
and the letters inside a group are the nodes of that level.  A group
holding more than two nodes makes the tree non-binary.
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

from .stack import Stack
from .text import erase_space_eol

_MAX_LINE = 999


class MalformedTreeError(ValueError):
    """Raised when the tree text is not a well-formed tree description."""


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def check_binary_tree(tree: str) -> bool:
    """Validate ``tree`` strictly and tell whether it is binary.

    Raises MalformedTreeError when the text is empty, does not start with
    ``(``, has unbalanced parentheses, holds a character other than a
    letter or a parenthesis, has a node outside any group, or has no node.
    """
    if not tree:
        raise MalformedTreeError("empty tree")
    if tree[0] != "(":
        raise MalformedTreeError("tree must start with '('")

    counts: Stack[int] = Stack()
    has_node = False
    binary = True
    for ch in tree:
        if ch == "(":
            counts.push(0)
        elif ch == ")":
            if counts.is_empty():
                raise MalformedTreeError("unmatched ')'")
            counts.pop()
        elif _is_letter(ch):
            if counts.is_empty():
                raise MalformedTreeError(f"node {ch!r} outside parentheses")
            has_node = True
            children = counts.pop() + 1
            if children > 2:
                binary = False
            counts.push(children)
        else:
            raise MalformedTreeError(f"unexpected character {ch!r}")

    if not counts.is_empty():
        raise MalformedTreeError("unclosed '('")
    if not has_node:
        raise MalformedTreeError("tree has no nodes")
    return binary


def is_binary_tree_lenient(tree: str) -> bool:
    """Tell whether no group of ``tree`` holds more than two nodes.

    No structure is validated: a stray ``)`` is ignored and any character
    other than a parenthesis counts as a node.
    """
    counts: Stack[int] = Stack()
    for ch in tree:
        if ch == "(":
            counts.push(0)
        elif ch == ")":
            if not counts.is_empty():
                counts.pop()
        else:
            children = (counts.pop() if not counts.is_empty() else -1) + 1
            if children > 2:
                return False
            counts.push(children)
    return True


def _walk_group(chars: Iterator[str]) -> bool:
    children = 0
    for ch in chars:
        if ch == "(":
            if not _walk_group(chars):
                return False
        elif ch == ")":
            return children <= 2
        else:
            children += 1
        if children > 2:
            return False
    return True


def is_binary_tree_recursive(tree: str) -> bool:
    """Tell, by descending into each group, whether none holds more than two nodes."""
    return _walk_group(iter(tree))


def verdict(line: str) -> str:
    """Return ``TRUE``, ``FALSE`` or ``ERROR`` for one line of tree text."""
    try:
        binary = check_binary_tree(erase_space_eol(line))
    except MalformedTreeError:
        return "ERROR"
    return "TRUE" if binary else "FALSE"


def main(argv: Sequence[str] | None = None) -> int:
    """Read one tree from standard input and print its verdict."""
    parser = argparse.ArgumentParser(
        prog="bintreekit",
        description="Read a parenthesised tree from standard input and "
        "print TRUE if it is binary, FALSE if not, ERROR if malformed.",
    )
    parser.parse_args(argv)

    line = sys.stdin.readline()
    if not line:
        print("ERROR")
        return 0
    print(verdict(line[:_MAX_LINE]))
    return 0