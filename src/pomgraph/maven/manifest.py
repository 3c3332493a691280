"""Convert a parsed POM into unlinked modules."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from pomgraph.checksum import module_checksum
from pomgraph.coordinates import package_url
from pomgraph.licenses import (
    LicenseInfo,
    build_license_concluded,
    build_license_declared,
    get_copyright,
)
from pomgraph.maven.pom import Dependency, Developer, MavenProject
from pomgraph.model import Module, Supplier

logger = logging.getLogger(__name__)


def supplier_from_developer(developer: Developer) -> Supplier | None:
    """Derive the supplier from a POM developer entry.

    A developer without a name yields no supplier, even with an email.
    """
    if not developer.name:
        return None
    supplier_type = "Organization" if developer.organization else "Person"
    return Supplier(
        type=supplier_type,
        name=developer.name,
        email=developer.email or None,
    )


def resolve_property_version(version: str, properties: dict[str, str]) -> str:
    """Resolve a ``${name}`` version through *properties*.

    Unresolvable references yield ``""``; so does a literal version that is
    not itself a property key.
    """
    key = version.strip()
    if key.startswith("${"):
        key = key[2:]
    if key.endswith("}"):
        key = key[:-1]
    return properties.get(key, "")


def _base_name(artifact_id: str) -> str:
    return PurePosixPath(artifact_id).name or artifact_id


def _project_module(
    project: MavenProject, project_dir: Path, license_info: LicenseInfo | None
) -> Module:
    name = (project.name or project.artifact_id).replace(" ", "-")
    mod = Module(
        name=name,
        version=project.version,
        root=True,
        path=str(project_dir),
        checksum=module_checksum(project_dir / "pom.xml"),
        package_url=package_url(project.group_id, project.artifact_id, project.version),
    )
    if project.developers:
        mod.supplier = supplier_from_developer(project.developers[0])
    download_url = project.distribution_management.download_url
    if download_url.startswith(("http://", "https://")):
        mod.download_location = download_url
    if project.url:
        mod.homepage = project.url
    if license_info is not None:
        mod.license_declared = build_license_declared(license_info.id)
        mod.license_concluded = build_license_concluded(license_info.id)
        mod.copyright = get_copyright(license_info.extracted_text)
        mod.license_comments = license_info.comments or None
    return mod


def _dependency_module(dep: Dependency, version: str, project_dir: Path) -> Module:
    return Module(
        name=_base_name(dep.artifact_id),
        version=version,
        path=dep.artifact_id,
        checksum=module_checksum(project_dir / dep.artifact_id),
        package_url=package_url(dep.group_id, dep.artifact_id, version),
    )


def extract_modules(
    project: MavenProject,
    project_dir: Path = Path("."),
    license_info: LicenseInfo | None = None,
    *,
    include_plugins: bool = True,
) -> list[Module]:
    """Return the unlinked modules declared by *project*.

    Order: the project itself (the only root), sub-modules, managed
    dependencies, direct dependencies, build plugins.
    """
    modules = [_project_module(project, project_dir, license_info)]

    for sub in project.modules:
        modules.append(
            Module(
                name=sub,
                version=project.version,
                path=sub,
                checksum=module_checksum(project_dir / sub / "pom.xml"),
            )
        )

    for dep in project.dependency_management:
        version = resolve_property_version(dep.version, project.properties)
        if not version:
            logger.debug(
                "Unresolved managed version %r for %s", dep.version, dep.artifact_id
            )
        modules.append(_dependency_module(dep, version, project_dir))

    for dep in project.dependencies:
        modules.append(_dependency_module(dep, dep.version, project_dir))

    if include_plugins:
        for plugin in project.plugins:
            modules.append(_dependency_module(plugin, plugin.version, project_dir))

    logger.debug("Manifest modules: %d", len(modules))
    return modules
