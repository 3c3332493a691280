"""
Unit tests for Maven command capture.
"""

import shutil
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pomgraph.errors import CommandError
from pomgraph.maven.commands import capture_pipeline, dependency_list, dependency_tree

requires_coreutils = pytest.mark.skipif(
    not all(shutil.which(c) for c in ("printf", "sort", "grep", "false", "ls", "sh")),
    reason="coreutils not available",
)


def _which(name):
    return f"/usr/bin/{name}"


@requires_coreutils
class TestCapturePipeline:
    """Tests for capture_pipeline with real processes."""

    def test_single_command(self):
        assert capture_pipeline([["printf", "hello\\n"]]) == "hello\n"

    def test_pipeline(self):
        output = capture_pipeline([["printf", "b\\na\\nb\\n"], ["sort", "-u"]])
        assert output == "a\nb\n"

    def test_large_output_does_not_block(self):
        output = capture_pipeline([["printf", "%070000d\\n", "0"]])
        assert len(output) == 70001

    def test_grep_without_match_is_not_an_error(self):
        assert capture_pipeline([["printf", "x\\n"], ["grep", "zzz"]]) == ""

    def test_failing_stage(self):
        with pytest.raises(CommandError) as exc_info:
            capture_pipeline([["false"]])
        assert exc_info.value.returncode == 1

    def test_failing_stage_reports_its_own_stderr(self):
        with pytest.raises(CommandError) as exc_info:
            capture_pipeline(
                [["sh", "-c", "echo resolution failed >&2; exit 3"], ["sort", "-u"]]
            )
        assert exc_info.value.returncode == 3
        assert exc_info.value.command[0] == "sh"
        assert exc_info.value.stderr.strip() == "resolution failed"
        assert "resolution failed" in str(exc_info.value)

    def test_missing_executable(self, tmp_path):
        with pytest.raises(CommandError) as exc_info:
            capture_pipeline([[str(tmp_path / "no-such-command")]])
        assert exc_info.value.returncode is None

    def test_cwd(self, tmp_path):
        (tmp_path / "marker.txt").write_text("")
        output = capture_pipeline([["ls"]], cwd=tmp_path)
        assert "marker.txt" in output


class TestDependencyList:
    """Tests for dependency_list."""

    @patch("pomgraph.maven.commands.capture_pipeline")
    @patch("pomgraph.maven.commands.shutil.which", side_effect=_which)
    def test_builds_filtered_pipeline(self, mock_which, mock_capture, tmp_path):
        mock_capture.return_value = (
            "   com.a:x:jar:1.0:compile\n Finished at: 2024-01-01T10:00:00Z\n"
        )

        lines = dependency_list(tmp_path)

        commands = mock_capture.call_args.args[0]
        assert commands[0] == ["/usr/bin/mvn", "-o", "dependency:list"]
        assert commands[1] == ["/usr/bin/grep", ":.*:.*:.*"]
        assert commands[2] == ["/usr/bin/cut", "-d]", "-f2-"]
        assert commands[3] == ["/usr/bin/sort", "-u"]
        assert mock_capture.call_args.kwargs["cwd"] == tmp_path
        assert lines == [
            "   com.a:x:jar:1.0:compile",
            " Finished at: 2024-01-01T10:00:00Z",
            "",
        ]

    @patch("pomgraph.maven.commands.capture_pipeline", return_value="")
    @patch("pomgraph.maven.commands.shutil.which", side_effect=_which)
    def test_online(self, mock_which, mock_capture, tmp_path):
        dependency_list(tmp_path, "mvnw", offline=False)
        assert mock_capture.call_args.args[0][0] == ["/usr/bin/mvnw", "dependency:list"]

    @patch("pomgraph.maven.commands.shutil.which", return_value=None)
    def test_missing_maven(self, mock_which, tmp_path):
        with pytest.raises(CommandError):
            dependency_list(tmp_path)


class TestDependencyTree:
    """Tests for dependency_tree."""

    @patch("pomgraph.maven.commands.subprocess.run")
    @patch("pomgraph.maven.commands.shutil.which", side_effect=_which)
    def test_reads_output_file(self, mock_which, mock_run, tmp_path):
        def fake_run(cmd, **kwargs):
            out = next(a for a in cmd if a.startswith("-DoutputFile="))
            Path(out.split("=", 1)[1]).write_text(
                "com.a:root:jar:1.0\n+- com.a:child:jar:1.0:compile\n"
            )
            return MagicMock(returncode=0, stdout="", stderr="")

        mock_run.side_effect = fake_run

        lines = dependency_tree(tmp_path)

        assert lines == ["com.a:root:jar:1.0", "+- com.a:child:jar:1.0:compile"]
        cmd = mock_run.call_args.args[0]
        assert cmd[:3] == ["/usr/bin/mvn", "dependency:tree", "-DappendOutput=true"]
        assert mock_run.call_args.kwargs["cwd"] == str(tmp_path)

    @patch("pomgraph.maven.commands.subprocess.run")
    @patch("pomgraph.maven.commands.shutil.which", side_effect=_which)
    def test_nonzero_exit(self, mock_which, mock_run, tmp_path):
        mock_run.return_value = MagicMock(
            returncode=1, stdout="[ERROR] BUILD FAILURE", stderr=""
        )
        with pytest.raises(CommandError) as exc_info:
            dependency_tree(tmp_path)
        assert exc_info.value.returncode == 1
        assert "BUILD FAILURE" in str(exc_info.value)

    @patch("pomgraph.maven.commands.subprocess.run")
    @patch("pomgraph.maven.commands.shutil.which", side_effect=_which)
    def test_missing_output_file(self, mock_which, mock_run, tmp_path):
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        with pytest.raises(CommandError):
            dependency_tree(tmp_path)
