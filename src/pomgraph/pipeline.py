"""Orchestrator: read pom → run Maven → extract → reconcile → assemble → render."""

from __future__ import annotations

import logging
from pathlib import Path

from pomgraph.config import Config, load_config
from pomgraph.graph import build_dependency_graph
from pomgraph.licenses import detect_license
from pomgraph.maven.commands import dependency_list, dependency_tree
from pomgraph.maven.manifest import extract_modules
from pomgraph.maven.pom import read_pom
from pomgraph.maven.reconcile import reconcile_dependency_list
from pomgraph.maven.tree import parse_dependency_tree
from pomgraph.model import Module
from pomgraph.renderer.json import render_json

logger = logging.getLogger(__name__)


def extract_graph(project_dir: Path, config: Config | None = None) -> list[Module]:
    """Build the module graph for the Maven project in *project_dir*.

    Raises ExtractionError (or a subclass) if the POM cannot be read or a
    Maven command fails.
    """
    config = config or load_config(project_dir)
    project = read_pom(project_dir / "pom.xml")

    dep_list = dependency_list(project_dir, config.mvn, offline=config.offline)
    tree = dependency_tree(project_dir, config.mvn)

    license_info = detect_license(project_dir, project.licenses)
    if license_info is None:
        logger.debug("No license detected in %s", project_dir)

    modules = extract_modules(
        project,
        project_dir,
        license_info,
        include_plugins=config.include_plugins,
    )
    modules.extend(
        reconcile_dependency_list(
            dep_list,
            project.dependencies,
            project.dependency_management,
            project_dir,
        )
    )

    return build_dependency_graph(modules, parse_dependency_tree(tree))


def run(
    project_dir: Path,
    *,
    output: Path | None = None,
    mvn: str | None = None,
    offline: bool | None = None,
    include_plugins: bool | None = None,
) -> Path:
    """Run the full pipeline, write the JSON graph and return its path."""
    project_dir = project_dir.resolve()

    config = load_config(project_dir)
    if mvn is not None:
        config.mvn = mvn
    if offline is not None:
        config.offline = offline
    if include_plugins is not None:
        config.include_plugins = include_plugins

    modules = extract_graph(project_dir, config)
    logger.debug("Modules: %d", len(modules))

    out_path = output or config.output or (project_dir / "pomgraph.json")
    render_json(modules, out_path)
    logger.info("Generated %s", out_path)
    return out_path
