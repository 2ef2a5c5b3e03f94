"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from polyvcs import __version__
from polyvcs.cli import app
from polyvcs.vcs import InvocationError, RepositoryKind

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestInitCommand:
    """Tests for init command."""

    @patch("polyvcs.cli.RepositoryFactory")
    def test_init_success(self, mock_factory: MagicMock, tmp_path: Path) -> None:
        """Test successful initialization."""
        mock_repo = MagicMock()
        mock_repo.init.return_value = True
        mock_factory.create.return_value = mock_repo

        result = runner.invoke(app, ["init", "hg", str(tmp_path / "repo")])

        assert result.exit_code == 0
        assert mock_factory.create.call_args.args[0] == RepositoryKind.MERCURIAL
        mock_repo.init.assert_called_once_with(str(tmp_path / "repo"))
        assert "Initialized Mercurial repository" in result.output

    @patch("polyvcs.cli.RepositoryFactory")
    def test_init_failure(self, mock_factory: MagicMock, tmp_path: Path) -> None:
        """Test that a failed init exits with 1."""
        mock_repo = MagicMock()
        mock_repo.init.return_value = False
        mock_factory.create.return_value = mock_repo

        result = runner.invoke(app, ["init", "git", str(tmp_path)])

        assert result.exit_code == 1
        assert "could not initialize" in result.output

    @patch("polyvcs.cli.RepositoryFactory")
    def test_init_invocation_error(self, mock_factory: MagicMock, tmp_path: Path) -> None:
        """Test that a missing binary is reported."""
        mock_repo = MagicMock()
        mock_repo.init.side_effect = InvocationError("Unable to run bzr")
        mock_factory.create.return_value = mock_repo

        result = runner.invoke(app, ["init", "bzr", str(tmp_path / "repo")])

        assert result.exit_code == 1
        assert "Unable to run bzr" in result.output

    def test_init_unimplemented_backend(self, tmp_path: Path) -> None:
        """Test that placeholder backends are reported as errors."""
        result = runner.invoke(app, ["init", "svn", str(tmp_path / "repo")])

        assert result.exit_code == 1
        assert "not implemented" in result.output

    @patch("polyvcs.cli.RepositoryFactory")
    def test_init_placeholder_kind_is_rejected_early(self, mock_factory: MagicMock, tmp_path: Path) -> None:
        """Test that CVS is refused without creating a repository handle."""
        result = runner.invoke(app, ["init", "cvs", str(tmp_path / "repo")])

        assert result.exit_code == 1
        assert "CVS support is not implemented" in result.output
        mock_factory.create.assert_not_called()

    def test_init_unknown_kind(self, tmp_path: Path) -> None:
        """Test that the unknown kind is rejected."""
        result = runner.invoke(app, ["init", "unknown", str(tmp_path / "repo")])

        assert result.exit_code == 1

    def test_init_invalid_env_file(self, tmp_path: Path) -> None:
        """Test that a missing env file is a configuration error."""
        result = runner.invoke(
            app,
            ["init", "git", str(tmp_path / "repo"), "--env-file", str(tmp_path / "missing.env")],
        )

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestDetectCommand:
    """Tests for detect command."""

    def test_detect_known(self, tmp_path: Path) -> None:
        """Test printing the detected kind."""
        (tmp_path / ".hg").mkdir()

        result = runner.invoke(app, ["detect", str(tmp_path)])

        assert result.exit_code == 0
        assert "hg" in result.output

    def test_detect_defaults_to_current_directory(self, isolated_cwd: Path) -> None:
        """Test detection of the working directory."""
        (isolated_cwd / ".bzr").mkdir()

        result = runner.invoke(app, ["detect"])

        assert result.exit_code == 0
        assert "bzr" in result.output

    def test_detect_unknown(self, tmp_path: Path) -> None:
        """Test that an unrecognized directory exits with 1."""
        result = runner.invoke(app, ["detect", str(tmp_path)])

        assert result.exit_code == 1
        assert "No repository found" in result.output


class TestBranchesCommand:
    """Tests for branches command."""

    @patch("polyvcs.cli.RepositoryFactory")
    def test_branches_lists_names(self, mock_factory: MagicMock, tmp_path: Path) -> None:
        """Test that each branch is printed."""
        mock_repo = MagicMock()
        mock_repo.branches.return_value = ["main", "feature/x"]
        mock_factory.get_repo.return_value = mock_repo

        result = runner.invoke(app, ["branches", str(tmp_path)])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["main", "feature/x"]

    def test_branches_unknown_repository(self, tmp_path: Path) -> None:
        """Test that an unrecognized directory exits with 1."""
        result = runner.invoke(app, ["branches", str(tmp_path)])

        assert result.exit_code == 1
        assert "No repository found" in result.output

    def test_branches_unimplemented_backend(self, tmp_path: Path) -> None:
        """Test that a CVS checkout is reported as unsupported."""
        (tmp_path / ".cvs").mkdir()

        result = runner.invoke(app, ["branches", str(tmp_path)])

        assert result.exit_code == 1
        assert "not implemented" in result.output


class TestVersionCommand:
    """Tests for version command."""

    def test_version(self) -> None:
        """Test version output."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
