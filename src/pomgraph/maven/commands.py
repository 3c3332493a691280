"""Run Maven and capture the dependency tree and dependency list."""

from __future__ import annotations

import io
import logging
import shutil
import subprocess
import tempfile
import threading
from contextlib import ExitStack
from pathlib import Path

from pomgraph.errors import CommandError

logger = logging.getLogger(__name__)

# Exit statuses other than 0 that a pipeline stage may return without failing.
# grep exits 1 when nothing matched.
_BENIGN_STATUS = {"grep": {1}}


def _resolve_executable(name: str) -> str:
    path = shutil.which(name)
    if path is None:
        raise CommandError([name])
    return path


def capture_pipeline(commands: list[list[str]], cwd: Path | None = None) -> str:
    """Run *commands* as a shell-style pipeline and return the final stdout.

    A background thread drains the last stage's stdout into memory while
    this thread waits for every stage to exit; the drain thread is joined
    before the buffer is read, so no stage can block on a full pipe.
    Each stage writes stderr to its own scratch file, which is attached to
    the CommandError raised for the first stage that fails.
    """
    buffer = io.StringIO()
    procs: list[subprocess.Popen] = []
    errfiles = []

    with ExitStack() as stack:
        upstream = None
        for cmd in commands:
            errfile = stack.enter_context(
                tempfile.TemporaryFile(mode="w+", encoding="utf-8", errors="replace")
            )
            try:
                proc = subprocess.Popen(
                    cmd,
                    stdin=upstream,
                    stdout=subprocess.PIPE,
                    stderr=errfile,
                    cwd=str(cwd) if cwd else None,
                    text=True,
                )
            except OSError as e:
                for p in procs:
                    p.kill()
                    p.wait()
                raise CommandError(cmd, stderr=str(e)) from e
            stack.enter_context(proc)
            # Let the upstream process receive SIGPIPE if this one exits early.
            if upstream is not None:
                upstream.close()
            upstream = proc.stdout
            procs.append(proc)
            errfiles.append(errfile)

        final = procs[-1]

        def _drain() -> None:
            for chunk in iter(lambda: final.stdout.read(8192), ""):
                buffer.write(chunk)

        drain = threading.Thread(target=_drain, daemon=True)
        drain.start()

        returncodes = [p.wait() for p in procs]
        drain.join()

        for cmd, code, errfile in zip(commands, returncodes, errfiles):
            stage = Path(cmd[0]).name
            if code != 0 and code not in _BENIGN_STATUS.get(stage, set()):
                errfile.seek(0)
                raise CommandError(cmd, code, errfile.read())

    return buffer.getvalue()


def dependency_list(
    project_dir: Path, mvn: str = "mvn", *, offline: bool = True
) -> list[str]:
    """Return the sorted, de-duplicated ``mvn dependency:list`` lines.

    The result keeps the trailing blank/banner lines that the reconciler
    discards.
    """
    mvn_cmd = [_resolve_executable(mvn)]
    if offline:
        mvn_cmd.append("-o")
    mvn_cmd.append("dependency:list")
    commands = [
        mvn_cmd,
        [_resolve_executable("grep"), ":.*:.*:.*"],
        [_resolve_executable("cut"), "-d]", "-f2-"],
        [_resolve_executable("sort"), "-u"],
    ]
    output = capture_pipeline(commands, cwd=project_dir)
    lines = output.split("\n")
    logger.debug("mvn dependency:list: %d lines", len(lines))
    return lines


def dependency_tree(project_dir: Path, mvn: str = "mvn") -> list[str]:
    """Return the lines of ``mvn dependency:tree`` written to a scratch file."""
    mvn_path = _resolve_executable(mvn)
    with tempfile.TemporaryDirectory(prefix="pomgraph-") as tmp:
        output_file = Path(tmp) / "dependency-tree.txt"
        cmd = [
            mvn_path,
            "dependency:tree",
            "-DappendOutput=true",
            f"-DoutputFile={output_file}",
        ]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(project_dir),
            )
        except OSError as e:
            raise CommandError(cmd, stderr=str(e)) from e

        if result.returncode != 0:
            # Maven reports build errors on stdout.
            raise CommandError(cmd, result.returncode, result.stderr or result.stdout)

        try:
            text = output_file.read_text(encoding="utf-8")
        except OSError as e:
            raise CommandError(cmd, result.returncode, f"no tree output: {e}") from e

    lines = text.splitlines()
    logger.debug("mvn dependency:tree: %d lines", len(lines))
    return lines
