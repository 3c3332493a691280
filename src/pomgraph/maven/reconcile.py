"""Add modules found by ``mvn dependency:list`` but missing from pom.xml."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pomgraph.checksum import module_checksum
from pomgraph.coordinates import MalformedCoordinate, parse_coordinate
from pomgraph.maven.pom import Dependency
from pomgraph.model import Module

logger = logging.getLogger(__name__)

# A blank separator and the completion banner close every listing.
_TRAILING_LINES = 2


def reconcile_dependency_list(
    lines: Sequence[str],
    dependencies: Sequence[Dependency],
    dependency_management: Sequence[Dependency],
    project_dir: Path = Path("."),
) -> list[Module]:
    """Return unlinked modules for listed artifacts not declared in the POM.

    *lines* is the sorted, de-duplicated listing; its final two lines are
    always discarded.  Blank and malformed lines are skipped.
    """
    declared = {d.artifact_id for d in dependencies}
    declared.update(d.artifact_id for d in dependency_management)

    added: list[Module] = []
    for line in lines[: max(len(lines) - _TRAILING_LINES, 0)]:
        if not line.strip():
            continue
        try:
            coord = parse_coordinate(line)
        except MalformedCoordinate:
            logger.debug("Skipping dependency list line: %r", line)
            continue

        if coord.artifact in declared:
            continue
        declared.add(coord.artifact)

        added.append(
            Module(
                name=coord.artifact,
                version=coord.version,
                path=coord.artifact,
                checksum=module_checksum(project_dir / coord.artifact),
                package_url=coord.purl,
            )
        )

    logger.debug("Dependency list added %d undeclared modules", len(added))
    return added
