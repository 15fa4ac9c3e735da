"""Turns command-line tokens into work items.

Two passes over the tokens:

1. Link markers (``-s-``, ``-h-``) claim their predecessor and successor.
2. Every token left over becomes a FILE item; ``-o``/``--open`` flags
   the item that follows it.

Markers that share a boundary token (``A -s- B -h- C``) are not treated
as a conflict: both links are emitted, in left-to-right order.
"""

import logging
from typing import Iterable, Sequence

from mk.domain.constants import HARDLINK_MARKER, OPEN_FLAGS, SYMLINK_MARKER
from mk.domain.errors import TaskParseError
from mk.domain.models import WorkItem, WorkKind

logger = logging.getLogger(__name__)


_LINK_MARKERS: dict[str, tuple[WorkKind, str]] = {
    SYMLINK_MARKER: (WorkKind.SYMLINK, "symlink"),
    HARDLINK_MARKER: (WorkKind.HARDLINK, "hardlink"),
}


def parse_tasks(tokens: Sequence[str]) -> list[WorkItem]:
    """Parse tokens into work items, links first, in discovery order.

    Args:
        tokens: Arguments following the program name

    Returns:
        One work item per link marker plus one per remaining path token.
        Use sort_tasks() for execution order.

    Raises:
        TaskParseError: If a link marker is the first or last token
    """
    tasks: list[WorkItem] = []
    consumed = [False] * len(tokens)

    i = 0
    while i < len(tokens):
        marker = _LINK_MARKERS.get(tokens[i])
        if marker is None:
            i += 1
            continue

        kind, label = marker
        if i == 0:
            raise TaskParseError(
                f"invalid input: mk /specify/{label}/path {tokens[i]}> /target/path"
            )
        if i == len(tokens) - 1:
            raise TaskParseError(
                f"invalid input: mk /{label}/path {tokens[i]}> /specify/target/path"
            )

        tasks.append(WorkItem(kind=kind, paths=[tokens[i - 1], tokens[i + 1]]))
        consumed[i - 1] = consumed[i] = consumed[i + 1] = True
        i += 2

    i = 0
    while i < len(tokens):
        if consumed[i]:
            i += 1
            continue

        open_after = False
        if tokens[i] in OPEN_FLAGS:
            following = next((j for j in range(i + 1, len(tokens)) if not consumed[j]), None)
            if following is not None:
                open_after = True
                i = following

        tasks.append(WorkItem(kind=WorkKind.FILE, open_after=open_after, paths=[tokens[i]]))
        i += 1

    logger.debug(f"Parsed {len(tokens)} token(s) into {len(tasks)} work item(s)")
    return tasks


def sort_tasks(tasks: Iterable[WorkItem]) -> list[WorkItem]:
    """Return tasks in execution order: ascending by first path (stable)."""
    return sorted(tasks, key=lambda t: t.first_path)
