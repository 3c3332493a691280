"""Data model for the SBOM module graph."""

from __future__ import annotations

from dataclasses import dataclass, field

HASH_ALGO_SHA1 = "SHA1"


@dataclass(frozen=True)
class CheckSum:
    """Digest over a module's reference path (empty value when unavailable)."""

    algorithm: str = HASH_ALGO_SHA1
    value: str = ""


@dataclass(frozen=True)
class Supplier:
    """Person or organization supplying a module."""

    type: str  # "Person" or "Organization"
    name: str
    email: str | None = None


@dataclass
class Module:
    """One resolvable unit of software: the project, a sub-module, or a dependency."""

    name: str
    version: str = ""
    checksum: CheckSum = field(default_factory=CheckSum)
    path: str = ""
    supplier: Supplier | None = None
    homepage: str | None = None
    download_location: str | None = None
    package_url: str | None = None
    license_declared: str | None = None
    license_concluded: str | None = None
    license_comments: str | None = None
    copyright: str | None = None
    root: bool = False
    # Direct dependencies, keyed by module name. Each value is an owned copy.
    dependencies: dict[str, Module] = field(default_factory=dict)
