"""ASCII rendering of a binary tree, one row of text per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.metrics import height
from bintree.node import Node


def _put(row: list[str], col: int, char: str) -> None:
    if col < 0:
        return
    if col >= len(row):
        row.extend(" " * (col + 1 - len(row)))
    row[col] = char


def _layout(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw ``tree`` into ``rows`` starting at ``offset``; return its total width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)
    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for col in range(start, start + count):
            _put(above, col, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text lines joined by newlines; empty for None."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row).ljust(2)
        lines.append(text[:2] + text[2:].rstrip(" "))
    return "\n".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree, each line newline-terminated; nothing for None."""
    if tree is None:
        return
    out = sys.stdout if file is None else file
    for line in render(tree).split("\n"):
        out.write(line + "\n")