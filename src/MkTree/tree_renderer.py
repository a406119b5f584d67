"""ASCII tree rendering."""

from __future__ import annotations

from MkTree.models import TreeItem

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def render_tree(root: TreeItem) -> str:
    """Render a tree as text, one newline-terminated line per item.

    Example output:
        root
        ├── a
        │   └── a1
        └── b
    """
    lines: list[str] = [root.content]
    _render_children(root.children, lines, prefix="")
    return "\n".join(lines) + "\n"


def _render_children(
    children: list[TreeItem],
    lines: list[str],
    prefix: str,
) -> None:
    """Recursively render the children into lines."""
    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(f"{prefix}{connector}{child.content}")

        if child.children:
            extension = SPACE if is_last else PIPE
            _render_children(child.children, lines, prefix + extension)
