"""Fatal extraction errors."""

from __future__ import annotations

from pathlib import Path


class ExtractionError(Exception):
    """Base class for errors that abort an extraction run."""


class ManifestNotFoundError(ExtractionError):
    """The build descriptor could not be opened."""

    def __init__(self, path: Path, reason: str = "not found"):
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class MalformedManifestError(ExtractionError):
    """The build descriptor could not be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Could not parse {path}: {reason}")


class CommandError(ExtractionError):
    """An external command failed to start or exited non-zero."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(command)
        if returncode is None:
            msg = f"Could not run {cmd}"
        else:
            msg = f"{cmd} exited with status {returncode}"
        if stderr:
            msg += f": {stderr.strip()}"
        super().__init__(msg)
