"""Draw a binary tree as text, one line per level."""

from __future__ import annotations

import sys
from typing import TextIO

from .tree import Node, height


def _write(row: list[str], start: int, text: str) -> None:
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    row[start:end] = text


def _layout(node: Node, offset: int, level: int, rows: list[list[str]]) -> int:
    """Place the subtree starting at column offset; return the width it takes."""
    label = f"({node.value:03d})"
    width = len(label)
    is_left = node.parent is not None and node.parent.left is node
    left = _layout(node.left, offset, level + 1, rows) if node.left else 0
    right = (
        _layout(node.right, offset + left + width, level + 1, rows)
        if node.right
        else 0
    )
    _write(rows[level], offset + left, label)
    if level:
        above = rows[level - 1]
        anchor = offset + left + width // 2
        if is_left:
            _write(above, anchor, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, anchor, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Return the drawing of the tree, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        lines.append(text[:2] + text[2:].rstrip(" "))
    return "".join(line + "\n" for line in lines)


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))