"""Nested tree construction from validated outline lines."""

from __future__ import annotations

import logging

from MkTree.models import Line, TreeItem

logger = logging.getLogger(__name__)


def build_tree(lines: list[Line]) -> TreeItem | None:
    """Group validated lines into a tree rooted at the first line.

    Expects the output of :func:`MkTree.outline_parser.parse_lines`.
    Returns None for an empty outline.
    """
    if not lines:
        return None

    root = TreeItem(
        content=lines[0].content,
        children=_build_children(lines, 1, len(lines), parent_indentation=0),
    )
    logger.debug("Root %r with %d children", root.content, len(root.children))
    return root


def _build_children(
    lines: list[Line],
    start: int,
    end: int,
    parent_indentation: int,
) -> list[TreeItem]:
    """Build the direct children found in ``lines[start:end]``."""
    children: list[TreeItem] = []
    i = start
    while i < end:
        item = lines[i]
        if item.indentation != parent_indentation + 1:
            i += 1
            continue

        # The child's subtree runs until the next line at its depth or above
        j = i + 1
        while j < end and lines[j].indentation > item.indentation:
            j += 1

        children.append(
            TreeItem(
                content=item.content,
                children=_build_children(lines, i + 1, j, item.indentation),
            )
        )
        i = j

    return children
