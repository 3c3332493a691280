"""SHA-1 checksums over module reference paths."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from pomgraph.model import HASH_ALGO_SHA1, CheckSum

logger = logging.getLogger(__name__)


def _hash_file(path: Path, hasher) -> None:
    with open(path, "rb") as f:
        while chunk := f.read(8192):
            hasher.update(chunk)


def read_checksum(path: Path) -> str:
    """Return the SHA-1 hex digest of *path*, or ``""`` if it cannot be read.

    Directories are hashed over their sorted files, relative path first, so
    the digest reflects both layout and content.
    """
    hasher = hashlib.sha1()
    try:
        if path.is_file():
            _hash_file(path, hasher)
        elif path.is_dir():
            for file_path in sorted(f for f in path.rglob("*") if f.is_file()):
                hasher.update(str(file_path.relative_to(path)).encode())
                _hash_file(file_path, hasher)
        else:
            return ""
    except OSError as e:
        logger.debug("Could not checksum %s: %s", path, e)
        return ""
    return hasher.hexdigest()


def module_checksum(path: Path) -> CheckSum:
    return CheckSum(algorithm=HASH_ALGO_SHA1, value=read_checksum(path))
