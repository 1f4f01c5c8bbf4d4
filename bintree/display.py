"""Sideways text rendering of a binary tree."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from bintree.node import Node


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn sideways: right subtree above, left below.

    Each node appears as ``____(nnn)``, prefixed by ``L--`` or ``R--`` when
    it is a left or right child.  An empty tree renders as an empty string.
    """
    if tree is None:
        return ""
    parts: list[str] = []
    stack: list[Union[str, Node]] = [tree]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        pieces: list[Union[str, Node]] = []
        if item.right is not None:
            pieces.extend(("  ", item.right, "\n"))
        label = "____"
        if item.parent is not None:
            label += "L--" if item.parent.left is item else "R--"
        pieces.append(f"{label}({item.n:03d})\n")
        if item.left is not None:
            pieces.extend(("  ", item.left, "\n"))
        stack.extend(reversed(pieces))
    return "".join(parts)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendering of ``tree`` to ``file`` (standard output by default)."""
    out = file if file is not None else sys.stdout
    out.write(render(tree))