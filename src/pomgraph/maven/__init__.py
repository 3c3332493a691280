"""Maven extractors: POM reading, dependency tree/list parsing, reconciliation."""

from __future__ import annotations

from pomgraph.maven.manifest import extract_modules, supplier_from_developer
from pomgraph.maven.pom import MavenProject, read_pom
from pomgraph.maven.reconcile import reconcile_dependency_list
from pomgraph.maven.tree import classify_line, parse_dependency_tree

__all__ = [
    "MavenProject",
    "classify_line",
    "extract_modules",
    "parse_dependency_tree",
    "read_pom",
    "reconcile_dependency_list",
    "supplier_from_developer",
]
