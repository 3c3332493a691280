"""Wire unlinked modules into a dependency graph."""

from __future__ import annotations

import logging
from dataclasses import replace

from pomgraph.model import Module

logger = logging.getLogger(__name__)


def build_dependency_graph(
    modules: list[Module], tree: dict[str, list[str]]
) -> list[Module]:
    """Populate each module's ``dependencies`` from the parent→children *tree*.

    Every edge gets its own copy of the child, taken from the unlinked list
    before any edge is wired, so two parents of the same child never share a
    record.  Names that are not in *modules* are dropped.  *modules* is
    updated in place and returned.
    """
    index: dict[str, int] = {}
    for i, mod in enumerate(modules):
        index[mod.name] = i
    snapshots = {name: replace(modules[i], dependencies={}) for name, i in index.items()}

    edges = 0
    for parent, children in tree.items():
        if parent not in index:
            logger.debug("Tree parent %s is not a known module", parent)
            continue
        deps = modules[index[parent]].dependencies
        for child in children:
            if not child or child not in index:
                logger.debug("Tree child %s of %s is not a known module", child, parent)
                continue
            deps[child] = replace(snapshots[child], dependencies={})
            edges += 1

    logger.debug("Dependency graph: %d modules, %d edges", len(modules), edges)
    return modules

