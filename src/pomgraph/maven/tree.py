"""Recover parent→child edges from ``mvn dependency:tree`` text output.

The tree is rendered with ASCII glyphs::

    com.a:root:jar:1.0
    +- com.a:child1:jar:1.0
    |  \\- com.a:grand1:jar:1.0
    \\- com.a:child2:jar:1.0

Only two nesting levels are distinguished.  A deep line records a single
child for the most recently seen package, replacing any earlier one, so
several grandchildren under one parent collapse to the last of them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pomgraph.coordinates import MalformedCoordinate, parse_coordinate

logger = logging.getLogger(__name__)

ROOT = 0
CHILD = 1
DESCENDANT = 2


def classify_line(line: str) -> tuple[int, bool]:
    """Return ``(depth, is_dependency)`` for one tree line."""
    if line.startswith("\\-") or line.startswith("+-"):
        return CHILD, True
    if "   \\-" in line or "|  \\- " in line:
        return DESCENDANT, True
    return ROOT, False


def parse_dependency_tree(lines: Iterable[str]) -> dict[str, list[str]]:
    """Map each package name to the names of its direct children."""
    tree: dict[str, list[str]] = {}
    current_root = ""
    children: list[str] = []
    last_seen = ""

    for line in lines:
        depth, _ = classify_line(line)
        try:
            name = parse_coordinate(line).artifact
        except MalformedCoordinate:
            if line.strip():
                logger.debug("Skipping tree line: %r", line)
            continue

        if depth == ROOT:
            current_root = name
            children = []
        elif depth == CHILD:
            children.append(name)
            tree[current_root] = children
        else:
            tree[last_seen] = [name]
        last_seen = name

    logger.debug(
        "Dependency tree: %d parents, %d edges",
        len(tree),
        sum(len(v) for v in tree.values()),
    )
    return tree


def parse_dependency_tree_text(text: str) -> dict[str, list[str]]:
    return parse_dependency_tree(text.splitlines())
