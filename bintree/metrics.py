"""Measurements and shape checks over a binary tree."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def _walk(tree: Optional[Node]) -> Iterator[tuple[Node, int]]:
    """Yield every node below ``tree`` with its level relative to ``tree``."""
    stack = [(tree, 0)] if tree is not None else []
    while stack:
        node, level = stack.pop()
        yield node, level
        if node.right is not None:
            stack.append((node.right, level + 1))
        if node.left is not None:
            stack.append((node.left, level + 1))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for a leaf or None."""
    return max((level for _, level in _walk(tree)), default=0)


def _node_height(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path; 0 for None."""
    return 0 if tree is None else height(tree) + 1


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node, _ in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node, _ in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the height of the left subtree minus that of the right subtree."""
    if tree is None:
        return 0
    return _node_height(tree.left) - _node_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node, _ in _walk(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every inner node has two children and all leaves share one level."""
    if tree is None:
        return False
    depth = 0
    node: Optional[Node] = tree
    while node is not None:
        depth += 1
        node = node.left
    for node, level in _walk(tree):
        if node.is_leaf():
            if level + 1 != depth:
                return False
        elif node.left is None or node.right is None:
            return False
    return True