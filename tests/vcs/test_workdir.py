"""Tests for WorkingDirectoryScope."""

import os
from pathlib import Path

import pytest

from polyvcs.vcs.workdir import WorkingDirectoryScope


@pytest.fixture
def start_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test from a known directory."""
    monkeypatch.chdir(tmp_path)
    return Path(os.getcwd())


class TestWorkingDirectoryScope:
    """Tests for WorkingDirectoryScope."""

    def test_changes_and_restores_directory(self, start_dir: Path) -> None:
        """Test that the directory is changed inside the block and restored after."""
        target = start_dir / "repo"
        target.mkdir()

        with WorkingDirectoryScope(target):
            assert Path(os.getcwd()) == target.resolve()

        assert Path(os.getcwd()) == start_dir

    def test_restores_directory_on_exception(self, start_dir: Path) -> None:
        """Test that an exception in the block still restores the directory."""
        target = start_dir / "repo"
        target.mkdir()

        with pytest.raises(RuntimeError, match="boom"), WorkingDirectoryScope(target):
            raise RuntimeError("boom")

        assert Path(os.getcwd()) == start_dir

    def test_restore_is_idempotent(self, start_dir: Path) -> None:
        """Test that only the first restore changes the directory."""
        target = start_dir / "repo"
        other = start_dir / "other"
        target.mkdir()
        other.mkdir()

        scope = WorkingDirectoryScope(target).enter()
        scope.restore()
        os.chdir(other)
        scope.restore()

        assert Path(os.getcwd()) == other.resolve()

    def test_restore_without_enter_is_noop(self, start_dir: Path) -> None:
        """Test that restoring a scope that was never entered does nothing."""
        WorkingDirectoryScope(start_dir / "missing").restore()

        assert Path(os.getcwd()) == start_dir

    def test_missing_target_leaves_directory_unchanged(self, start_dir: Path) -> None:
        """Test that entering a missing directory fails without side effects."""
        scope = WorkingDirectoryScope(start_dir / "missing")

        with pytest.raises(FileNotFoundError):
            scope.enter()

        scope.restore()
        assert Path(os.getcwd()) == start_dir

    def test_enter_twice_keeps_original_directory(self, start_dir: Path) -> None:
        """Test that a second enter() is refused and restore() still returns home."""
        target = start_dir / "repo"
        target.mkdir()

        scope = WorkingDirectoryScope(target).enter()
        with pytest.raises(RuntimeError, match="already active"):
            scope.enter()
        scope.restore()

        assert Path(os.getcwd()) == start_dir
