"""Parse Maven coordinates as printed by ``dependency:tree`` and ``dependency:list``."""

from __future__ import annotations

from dataclasses import dataclass

# Characters that may precede the groupId on a tree line: "|  +- ", "\- ", ...
_TREE_GLYPHS = " \t|+-\\"


class MalformedCoordinate(ValueError):
    """Raised when a line does not hold at least ``group:artifact``."""


@dataclass(frozen=True)
class Coordinate:
    """A ``group:artifact[:type[:classifier]:version[:scope]]`` coordinate."""

    group: str
    artifact: str
    type: str = ""
    classifier: str = ""
    version: str = ""
    scope: str = ""

    @property
    def purl(self) -> str:
        return package_url(self.group, self.artifact, self.version)


def package_url(group: str | None, artifact: str, version: str | None = None) -> str | None:
    """Return a ``pkg:maven`` package URL, or None without a group."""
    if not group or not artifact:
        return None
    purl = f"pkg:maven/{group}/{artifact}"
    if version:
        purl += f"@{version}"
    return purl


def parse_coordinate(text: str) -> Coordinate:
    """Parse one line of Maven output into a :class:`Coordinate`.

    Leading tree glyphs are ignored, as is anything after the first whitespace
    following the coordinate (``-- module x``, ``(optional)``, ...).  The
    field layout depends on the number of colon-separated fields::

        g:a            g:a:t           g:a:t:v
        g:a:t:v:s      g:a:t:c:v:s

    Raises :class:`MalformedCoordinate` when fewer than two non-empty
    fields are present.
    """
    stripped = text.lstrip(_TREE_GLYPHS).strip()
    token = stripped.split(None, 1)[0] if stripped else ""
    parts = token.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise MalformedCoordinate(f"not a coordinate: {text!r}")

    group, artifact = parts[0], parts[1]
    rest = parts[2:]
    if len(rest) >= 4:
        type_, classifier, version, scope = rest[0], rest[1], rest[2], rest[3]
    elif len(rest) == 3:
        type_, classifier, version, scope = rest[0], "", rest[1], rest[2]
    elif len(rest) == 2:
        type_, classifier, version, scope = rest[0], "", rest[1], ""
    elif len(rest) == 1:
        type_, classifier, version, scope = rest[0], "", "", ""
    else:
        type_, classifier, version, scope = "", "", "", ""

    return Coordinate(
        group=group,
        artifact=artifact,
        type=type_,
        classifier=classifier,
        version=version,
        scope=scope,
    )
