"""Outline to tree text conversion."""

from __future__ import annotations

from MkTree.outline_parser import parse_lines
from MkTree.tree_builder import build_tree
from MkTree.tree_renderer import render_tree


def convert_outline(text: str, fenced: bool = False) -> str | None:
    """Convert an outline into its rendered ASCII tree.

    Args:
        text: the whole outline, e.g. "root\\n# a\\n## a1\\n# b"
        fenced: wrap the tree in a Markdown code fence

    Returns None when the outline has no content. Invalid outlines raise
    an :class:`MkTree.outline_parser.OutlineError` subclass.
    """
    root = build_tree(parse_lines(text))
    if root is None:
        return None

    tree = render_tree(root)
    if fenced:
        return f"```text\n{tree}```\n"
    return tree
