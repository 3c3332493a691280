"""Per-project settings from ``.pomgraph.toml``."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = ".pomgraph.toml"


@dataclass
class Config:
    mvn: str = "mvn"
    offline: bool = True  # pass -o to dependency:list
    include_plugins: bool = True
    output: Path | None = None


# TOML value type accepted for each setting.
_SETTING_TYPES = {
    "mvn": str,
    "offline": bool,
    "include_plugins": bool,
    "output": str,
}


def load_config(project_dir: Path) -> Config:
    """Read the ``[pomgraph]`` table of ``.pomgraph.toml`` in *project_dir*.

    Missing or unreadable files yield the defaults.  A setting whose value
    has the wrong type is ignored with a warning.
    """
    config = Config()
    config_path = project_dir / CONFIG_FILE
    if not config_path.exists():
        return config

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", config_path, e)
        return config

    table = data.get("pomgraph", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring %s: [pomgraph] is not a table", config_path)
        return config

    for key, value in table.items():
        expected = _SETTING_TYPES.get(key)
        if expected is None:
            logger.debug("Ignoring unknown setting %r in %s", key, config_path)
            continue
        if not isinstance(value, expected):
            logger.warning(
                "Ignoring %s = %r in %s: expected %s",
                key,
                value,
                config_path,
                expected.__name__,
            )
            continue
        if key == "output":
            value = project_dir / value
        setattr(config, key, value)
    return config
