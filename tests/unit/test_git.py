"""Unit tests for git metadata collection."""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from readmegen.collectors.git import GIT_QUERIES, GitProbe
from readmegen.utils.process import NOT_AVAILABLE


class TestGitProbe:
    """Tests for GitProbe."""

    def test_queries(self) -> None:
        """Test the git arguments used for each key."""
        assert GIT_QUERIES == {
            "GIT_BRANCH": ("rev-parse", "--abbrev-ref", "HEAD"),
            "GIT_COMMIT": ("rev-parse", "--short", "HEAD"),
            "GIT_MESSAGE": ("log", "-1", "--pretty=%s"),
        }

    def test_failing_git(self, tmp_path: Path, fake_bin: Callable[[str, str], Path]) -> None:
        """Test that a git that always fails yields N/A for every key."""
        fake_bin("git", "echo 'fatal: broken' >&2\nexit 1")

        meta = GitProbe().collect(tmp_path)

        assert meta == {
            "GIT_BRANCH": NOT_AVAILABLE,
            "GIT_COMMIT": NOT_AVAILABLE,
            "GIT_MESSAGE": NOT_AVAILABLE,
        }

    def test_missing_git(self, tmp_path: Path) -> None:
        """Test a git executable that does not exist."""
        meta = GitProbe(executable=str(tmp_path / "no-git")).collect(tmp_path)

        assert set(meta.values()) == {NOT_AVAILABLE}

    def test_fake_git_output(self, tmp_path: Path, fake_bin: Callable[[str, str], Path]) -> None:
        """Test that output of each query is captured."""
        fake_bin(
            "git",
            'case "$1" in\n'
            '  rev-parse) if [ "$2" = "--short" ]; then echo abc1234; else echo main; fi ;;\n'
            '  log) echo "Add health endpoint" ;;\n'
            "esac",
        )

        meta = GitProbe().collect(tmp_path)

        assert meta == {
            "GIT_BRANCH": "main",
            "GIT_COMMIT": "abc1234",
            "GIT_MESSAGE": "Add health endpoint",
        }

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_real_repository(self, tmp_path: Path) -> None:
        """Test against a real repository with one commit."""

        def git(*args: str) -> None:
            subprocess.run(["git", *args], cwd=tmp_path, check=True, capture_output=True)

        git("init", "-b", "trunk")
        git("config", "user.email", "dev@example.com")
        git("config", "user.name", "Dev")
        (tmp_path / "file.txt").write_text("content")
        git("add", "file.txt")
        git("-c", "commit.gpgsign=false", "commit", "-m", "Initial commit")

        meta = GitProbe().collect(tmp_path)

        assert meta["GIT_BRANCH"] == "trunk"
        assert meta["GIT_MESSAGE"] == "Initial commit"
        assert len(meta["GIT_COMMIT"]) >= 7
