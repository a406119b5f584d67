"""Outline line normalization and structural validation."""

from __future__ import annotations

import logging
import re

from MkTree.models import Line

logger = logging.getLogger(__name__)

MARKER = "#"

# Leading whitespace, the marker run (depth), optional whitespace, content
_LINE_RE = re.compile(rf"^\s*({re.escape(MARKER)}*)\s*(.*)")


class OutlineError(Exception):
    """Raised when an outline cannot be turned into a single tree."""


class MultipleRootsError(OutlineError):
    """More than one line sits at depth 0."""


class MissingRootError(OutlineError):
    """The first line is not at depth 0."""


class IndentationJumpError(OutlineError):
    """A line is nested more than one level below its predecessor."""

    def __init__(self, previous: int, current: int) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            f"Incorrect indentation: was {previous} and now is {current}"
        )


def parse_lines(text: str) -> list[Line]:
    """Split an outline into validated lines.

    Each line may start with a run of ``#`` characters; the length of the
    run is the line's depth. Lines with no content after the marker run are
    dropped before validation, so blank lines never affect the result.

    Raises:
        MultipleRootsError: more than one line has depth 0.
        MissingRootError: the first line has a nonzero depth.
        IndentationJumpError: a line is more than one level deeper than
            the line before it.
    """
    lines: list[Line] = []
    dropped = 0
    # A byte-order mark would hide the first line's marker run
    text = text.removeprefix("\ufeff")
    for raw in text.split("\n"):
        match = _LINE_RE.match(raw)
        content = match.group(2).strip()
        if not content:
            dropped += 1
            continue
        lines.append(Line(content=content, indentation=len(match.group(1))))

    logger.debug("Parsed %d outline lines (%d blank dropped)", len(lines), dropped)

    if lines:
        _validate(lines)
    return lines


def _validate(lines: list[Line]) -> None:
    roots = sum(1 for line in lines if line.indentation == 0)
    if roots > 1:
        raise MultipleRootsError(
            f"There can be only one root element, found {roots}"
        )
    if lines[0].indentation != 0:
        raise MissingRootError("The first element should have no indentation")

    for prev, cur in zip(lines, lines[1:]):
        if cur.indentation > prev.indentation + 1:
            raise IndentationJumpError(prev.indentation, cur.indentation)
