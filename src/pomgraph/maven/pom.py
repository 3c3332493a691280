"""Read pom.xml into a typed structure using jgo."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree import ElementTree

from pomgraph.errors import MalformedManifestError, ManifestNotFoundError

if TYPE_CHECKING:
    from jgo.maven import POM

logger = logging.getLogger(__name__)

_DEFAULT_PLUGIN_GROUP = "org.apache.maven.plugins"


@dataclass
class Developer:
    name: str = ""
    email: str = ""
    organization: str = ""


@dataclass
class DistributionManagement:
    download_url: str = ""


@dataclass
class Dependency:
    """A dependency-like entry: dependency, managed dependency or plugin."""

    artifact_id: str
    group_id: str = ""
    version: str = ""
    scope: str = ""


@dataclass
class MavenProject:
    """The parts of a POM that feed module extraction."""

    artifact_id: str = ""
    group_id: str = ""
    name: str = ""
    version: str = ""
    url: str = ""
    developers: list[Developer] = field(default_factory=list)
    distribution_management: DistributionManagement = field(
        default_factory=DistributionManagement
    )
    properties: dict[str, str] = field(default_factory=dict)
    licenses: list[str] = field(default_factory=list)
    modules: list[str] = field(default_factory=list)
    dependency_management: list[Dependency] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    plugins: list[Dependency] = field(default_factory=list)


def _text(el: ElementTree.Element, tag: str) -> str:
    return (el.findtext(tag) or "").strip()


def _dependency(el: ElementTree.Element) -> Dependency | None:
    artifact_id = _text(el, "artifactId")
    if not artifact_id:
        return None
    return Dependency(
        artifact_id=artifact_id,
        group_id=_text(el, "groupId"),
        version=_text(el, "version"),
        scope=_text(el, "scope"),
    )


def _dependencies(pom: POM, path: str, default_group: str = "") -> list[Dependency]:
    deps = []
    for el in pom.elements(path):
        dep = _dependency(el)
        if dep is None:
            logger.debug("Skipping %s entry without artifactId", path)
            continue
        if not dep.group_id:
            dep.group_id = default_group
        deps.append(dep)
    return deps


def read_pom(pom_path: Path) -> MavenProject:
    """Parse *pom_path* into a :class:`MavenProject`.

    Raises ManifestNotFoundError if the file cannot be opened and
    MalformedManifestError if it is not a readable POM.
    """
    from jgo.maven import POM

    if not pom_path.is_file():
        raise ManifestNotFoundError(pom_path)

    try:
        pom = POM(pom_path)
    except OSError as e:
        raise ManifestNotFoundError(pom_path, str(e)) from e
    except (ElementTree.ParseError, ValueError, KeyError, AttributeError) as e:
        raise MalformedManifestError(pom_path, str(e)) from e

    developers = [
        Developer(
            name=_text(el, "name"),
            email=_text(el, "email"),
            organization=_text(el, "organization"),
        )
        for el in pom.elements("developers/developer")
    ]

    properties = {
        el.tag: (el.text or "").strip() for el in pom.elements("properties/*")
    }

    project = MavenProject(
        artifact_id=pom.artifactId or "",
        group_id=pom.groupId or "",
        name=(pom.value("name") or "").strip(),
        version=pom.version or "",
        url=(pom.value("url") or "").strip(),
        developers=developers,
        distribution_management=DistributionManagement(
            download_url=(pom.value("distributionManagement/downloadUrl") or "").strip()
        ),
        properties=properties,
        licenses=[v.strip() for v in pom.values("licenses/license/name") if v],
        modules=[v.strip() for v in pom.values("modules/module") if v],
        dependency_management=_dependencies(
            pom, "dependencyManagement/dependencies/dependency"
        ),
        dependencies=_dependencies(pom, "dependencies/dependency"),
        plugins=_dependencies(
            pom, "build/plugins/plugin", default_group=_DEFAULT_PLUGIN_GROUP
        ),
    )
    logger.debug(
        "Read %s: %d dependencies, %d managed, %d plugins, %d modules",
        pom_path,
        len(project.dependencies),
        len(project.dependency_management),
        len(project.plugins),
        len(project.modules),
    )
    return project
