"""Tests for task_source.py - the geralt subprocess adapter."""

import subprocess
from unittest.mock import patch

import pytest

from geralt_tui.errors import ExecutableNotFound, SubprocessFailure
from geralt_tui.task_source import GeraltTaskSource


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess([], returncode, stdout=stdout, stderr=stderr)


class TestRun:
    """Tests for GeraltTaskSource.run."""

    def test_argv_and_output(self) -> None:
        source = GeraltTaskSource("geralt", timeout=5)
        with patch("geralt_tui.task_source.subprocess.run", return_value=completed(stdout="[ ] (1) A\n")) as run:
            assert source.run("tree", "1") == "[ ] (1) A\n"

        args, kwargs = run.call_args
        assert args[0] == ["geralt", "tree", "1"]
        assert kwargs["timeout"] == 5
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True

    def test_no_subcommand(self) -> None:
        source = GeraltTaskSource("geralt")
        with patch("geralt_tui.task_source.subprocess.run", return_value=completed()) as run:
            source.run()
        assert run.call_args[0][0] == ["geralt"]

    def test_nonzero_exit_raises_with_process_text(self) -> None:
        source = GeraltTaskSource("geralt")
        result = completed(returncode=2, stderr="error: no task 9\n")
        with patch("geralt_tui.task_source.subprocess.run", return_value=result):
            with pytest.raises(SubprocessFailure) as excinfo:
                source.run("rm", "9")

        assert excinfo.value.returncode == 2
        assert "no task 9" in excinfo.value.output
        assert excinfo.value.argv == ["geralt", "rm", "9"]

    def test_missing_executable(self) -> None:
        source = GeraltTaskSource("no-such-geralt")
        with patch("geralt_tui.task_source.subprocess.run", side_effect=FileNotFoundError()):
            with pytest.raises(ExecutableNotFound):
                source.run("ls")

    def test_timeout(self) -> None:
        source = GeraltTaskSource("geralt", timeout=0.1)
        error = subprocess.TimeoutExpired(["geralt", "ls"], 0.1)
        with patch("geralt_tui.task_source.subprocess.run", side_effect=error):
            with pytest.raises(SubprocessFailure, match="timed out"):
                source.run("ls")


class TestCheckAvailable:
    """Tests for GeraltTaskSource.check_available."""

    def test_found(self) -> None:
        with patch("geralt_tui.task_source.shutil.which", return_value="/usr/bin/geralt"):
            assert GeraltTaskSource().check_available() == "/usr/bin/geralt"

    def test_not_found(self) -> None:
        with patch("geralt_tui.task_source.shutil.which", return_value=None):
            with pytest.raises(ExecutableNotFound):
                GeraltTaskSource().check_available()


class TestWorkingDirectory:
    """Tests for the configured working directory."""

    def test_missing_working_directory(self, tmp_path) -> None:
        """A missing cwd is a failed invocation, not a missing executable."""
        source = GeraltTaskSource("geralt", cwd=tmp_path / "missing")
        with patch("geralt_tui.task_source.subprocess.run") as run:
            with pytest.raises(SubprocessFailure, match="working directory not found"):
                source.run("ls")
        run.assert_not_called()
