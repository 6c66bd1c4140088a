"""Tests for the local git identity reader."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import patch

from sfcli.git.identity import get_git_config


def _mock_run(stdout: str, returncode: int = 0) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


class TestGetGitConfig:
    def test_returns_stripped_value(self) -> None:
        with patch("sfcli.git.identity.subprocess.run", return_value=_mock_run("Alice Example\n")) as run:
            assert get_git_config("user.name") == "Alice Example"

        assert run.call_args.args[0] == ["git", "config", "--get", "user.name"]

    def test_missing_key(self) -> None:
        with patch("sfcli.git.identity.subprocess.run", return_value=_mock_run("", returncode=1)):
            assert get_git_config("user.name") is None

    def test_blank_value(self) -> None:
        with patch("sfcli.git.identity.subprocess.run", return_value=_mock_run("   \n")):
            assert get_git_config("user.email") is None

    def test_git_not_installed(self) -> None:
        with patch("sfcli.git.identity.subprocess.run", side_effect=FileNotFoundError("git not found")):
            assert get_git_config("user.name") is None

    def test_timeout(self) -> None:
        with patch(
            "sfcli.git.identity.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=5),
        ):
            assert get_git_config("user.name") is None

    def test_runs_in_existing_directory(self, tmp_path: Path) -> None:
        with patch("sfcli.git.identity.subprocess.run", return_value=_mock_run("alice\n")) as run:
            get_git_config("user.name", cwd=tmp_path)

        assert run.call_args.kwargs["cwd"] == tmp_path

    def test_missing_directory_falls_back_to_process_cwd(self, tmp_path: Path) -> None:
        with patch("sfcli.git.identity.subprocess.run", return_value=_mock_run("alice\n")) as run:
            get_git_config("user.name", cwd=tmp_path / "not-yet-created")

        assert run.call_args.kwargs["cwd"] is None
