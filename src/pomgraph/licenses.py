"""License and copyright detection for the project directory."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

NOASSERTION = "NOASSERTION"

_LICENSE_FILES = (
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
    "LICENCE",
    "LICENCE.txt",
    "COPYING",
    "COPYING.txt",
    "license.txt",
)

# Only the head of a license file is matched; long texts (GPL-3.0) mention
# other licenses further down.
_HEAD_CHARS = 2000

# Ordered: more specific signatures first (LGPL before GPL, BSD-3 before BSD-2).
_SIGNATURES: list[tuple[str, re.Pattern[str]]] = [
    (spdx_id, re.compile(pattern, re.IGNORECASE))
    for spdx_id, pattern in [
        ("AGPL-3.0", r"affero general public license|\bagpl-?3"),
        ("LGPL-3.0", r"lesser general public license\W*(?:version|v)\s*3|\blgpl-?3"),
        ("LGPL-2.1", r"lesser general public license\W*(?:version|v)\s*2\.1|\blgpl-?2\.1"),
        ("GPL-3.0", r"general public license\W*(?:version|v)\s*3|\bgpl-?3"),
        ("GPL-2.0", r"general public license\W*(?:version|v)\s*2|\bgpl-?2"),
        (
            "Apache-2.0",
            r"apache\W+(?:software\W+)?licen[cs]e\W*(?:version|v)?\W*2\.0|apache\W*2\.0",
        ),
        ("MPL-2.0", r"mozilla public license\W*(?:version|v)?\W*2\.0|\bmpl-?2\.0"),
        ("EPL-2.0", r"eclipse public license\W*(?:version|v)?\W*2\.0|\bepl-?2\.0"),
        ("EPL-1.0", r"eclipse public license\W*(?:version|v)?\W*1\.0|\bepl-?1\.0"),
        ("BSD-3-Clause", r"neither the name|\bbsd-3|3-clause bsd|new bsd"),
        (
            "BSD-2-Clause",
            r"redistribution and use in source and binary forms|\bbsd-2|2-clause bsd|simplified bsd",
        ),
        ("MIT", r"permission is hereby granted, free of charge|\bmit\b"),
        ("Unlicense", r"free and unencumbered software|\bunlicense\b"),
    ]
]

_COPYRIGHT_RE = re.compile(
    r"^\s*(copyright\s+(?:\(c\)|©|\d{4}).*?)\s*$",
    re.IGNORECASE | re.MULTILINE,
)


@dataclass
class LicenseInfo:
    """Result of license detection."""

    id: str
    extracted_text: str = ""
    comments: str = ""


def identify_license(text: str | None) -> str | None:
    """Return the SPDX id whose signature matches *text*, or None."""
    if not text:
        return None
    head = text[:_HEAD_CHARS]
    for spdx_id, pattern in _SIGNATURES:
        if pattern.search(head):
            return spdx_id
    return None


def detect_license(
    directory: Path, declared_names: list[str] | None = None
) -> LicenseInfo | None:
    """Detect the license of the project in *directory*.

    License files win over names declared in the build descriptor; the
    declared names are only consulted when no file matches.
    """
    for file_name in _LICENSE_FILES:
        license_path = directory / file_name
        if not license_path.is_file():
            continue
        try:
            text = license_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Could not read %s: %s", license_path, e)
            continue
        spdx_id = identify_license(text)
        if spdx_id:
            logger.debug("License %s detected from %s", spdx_id, license_path)
            return LicenseInfo(
                id=spdx_id,
                extracted_text=text,
                comments=f"Detected from {file_name}",
            )

    for name in declared_names or []:
        spdx_id = identify_license(name)
        if spdx_id:
            logger.debug("License %s detected from declared name %r", spdx_id, name)
            return LicenseInfo(id=spdx_id, comments=f"Declared in pom.xml as {name!r}")

    return None


def build_license_declared(license_id: str | None) -> str:
    return license_id or NOASSERTION


def build_license_concluded(license_id: str | None) -> str:
    return license_id or NOASSERTION


def get_copyright(text: str | None) -> str:
    """Return the first copyright statement in *text*."""
    if text:
        m = _COPYRIGHT_RE.search(text)
        if m:
            return m.group(1)
    return NOASSERTION
