"""Render the module graph to a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from pomgraph.model import Module


def _module_to_dict(mod: Module) -> dict:
    d: dict = {
        "name": mod.name,
        "version": mod.version,
        "checksum": {"algorithm": mod.checksum.algorithm, "value": mod.checksum.value},
    }
    if mod.root:
        d["root"] = True
    if mod.supplier is not None:
        supplier = {"type": mod.supplier.type, "name": mod.supplier.name}
        if mod.supplier.email:
            supplier["email"] = mod.supplier.email
        d["supplier"] = supplier
    for key in (
        "homepage",
        "download_location",
        "package_url",
        "license_declared",
        "license_concluded",
        "license_comments",
        "copyright",
    ):
        value = getattr(mod, key)
        if value:
            d[key] = value
    if mod.dependencies:
        d["dependencies"] = {
            name: _module_to_dict(dep) for name, dep in mod.dependencies.items()
        }
    return d


def modules_to_dict(modules: list[Module]) -> dict:
    """Serialize *modules* into a JSON-ready dict."""
    root = next((m for m in modules if m.root), None)
    return {
        "project": root.name if root else None,
        "modules": [_module_to_dict(m) for m in modules],
    }


def render_json(modules: list[Module], output_path: Path) -> None:
    """Write the module graph to *output_path*."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(modules_to_dict(modules), indent=2) + "\n")
