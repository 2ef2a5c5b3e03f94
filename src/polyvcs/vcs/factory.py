"""VCS detection and factory for creating repository handles.

This module provides detection of the version control system used by a
directory and factory methods for creating the matching repository backend.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polyvcs.config import PolyVcsConfig
    from polyvcs.vcs.base import Repository

logger = logging.getLogger(__name__)


class RepositoryKind(str, Enum):
    """Version control systems polyvcs knows about.

    UNKNOWN is the null value. Known kinds are listed in order of preference,
    which is also the order markers are checked in during detection.
    """

    UNKNOWN = "unknown"
    GIT = "git"
    MERCURIAL = "hg"
    BAZAAR = "bzr"
    SUBVERSION = "svn"
    CVS = "cvs"

    @property
    def display_name(self) -> str:
        """Get display name for the repository kind.

        Returns:
            Human-readable name
        """
        return {
            RepositoryKind.UNKNOWN: "Unknown",
            RepositoryKind.GIT: "Git",
            RepositoryKind.MERCURIAL: "Mercurial",
            RepositoryKind.BAZAAR: "Bazaar",
            RepositoryKind.SUBVERSION: "Subversion",
            RepositoryKind.CVS: "CVS",
        }[self]

    @property
    def is_implemented(self) -> bool:
        """Whether the kind has a working backend."""
        return self in (RepositoryKind.GIT, RepositoryKind.MERCURIAL, RepositoryKind.BAZAAR)


# Checked in this order; the first marker directory found wins.
MARKERS: dict[str, RepositoryKind] = {
    ".git": RepositoryKind.GIT,
    ".hg": RepositoryKind.MERCURIAL,
    ".bzr": RepositoryKind.BAZAAR,
    ".svn": RepositoryKind.SUBVERSION,
    ".cvs": RepositoryKind.CVS,
}


def detect_repository_kind(path: str | Path) -> RepositoryKind:
    """Detect which VCS manages the directory at path.

    Only path itself is inspected, parent directories are not searched.
    A directory that merely contains a marker directory is reported as that
    kind of repository; its contents are not validated.

    Args:
        path: Repository root directory to check

    Returns:
        Detected RepositoryKind, or RepositoryKind.UNKNOWN
    """
    root = Path(path)
    for marker, kind in MARKERS.items():
        if (root / marker).is_dir():
            logger.debug("Found %s in %s", marker, root)
            return kind
    return RepositoryKind.UNKNOWN


class RepositoryFactory:
    """Factory for creating repository handles.

    Use get_repo() to open an existing repository of unknown kind. To create
    a new repository, build a handle with create() (or instantiate the
    backend class directly) and call its init() method.
    """

    @staticmethod
    def detect_kind(repo_path: str | Path) -> RepositoryKind:
        """Detect which VCS is in use at the given path.

        Args:
            repo_path: Path to check

        Returns:
            RepositoryKind enum value indicating detected VCS
        """
        return detect_repository_kind(repo_path)

    @staticmethod
    def get_repo(
        repo_path: str | Path,
        config: "PolyVcsConfig | None" = None,
    ) -> "Repository | None":
        """Open the repository rooted at repo_path.

        Args:
            repo_path: The root directory of the repository
            config: Optional configuration with binary overrides

        Returns:
            Repository bound to repo_path, or None if the kind was not recognized
        """
        kind = detect_repository_kind(repo_path)
        if kind == RepositoryKind.UNKNOWN:
            logger.debug("No repository detected at %s", repo_path)
            return None
        return RepositoryFactory.create(kind, repo_path, config)

    @staticmethod
    def create(
        kind: RepositoryKind,
        root: str | Path | None = None,
        config: "PolyVcsConfig | None" = None,
    ) -> "Repository":
        """Create a repository handle of the given kind.

        Args:
            kind: Repository kind
            root: Repository root (default: unset, assigned by init())
            config: Optional configuration with binary overrides

        Returns:
            Repository instance for the kind

        Raises:
            ValueError: If the kind is UNKNOWN or not supported
        """
        command = config.command_for(kind) if config is not None and kind != RepositoryKind.UNKNOWN else None

        if kind == RepositoryKind.GIT:
            from polyvcs.vcs.git.repository import GitRepository

            return GitRepository(root, command=command)
        elif kind == RepositoryKind.MERCURIAL:
            from polyvcs.vcs.mercurial.repository import MercurialRepository

            return MercurialRepository(root, command=command)
        elif kind == RepositoryKind.BAZAAR:
            from polyvcs.vcs.bazaar.repository import BazaarRepository

            return BazaarRepository(root, command=command)
        elif kind == RepositoryKind.SUBVERSION:
            from polyvcs.vcs.unsupported import SubversionRepository

            return SubversionRepository(root, command=command)
        elif kind == RepositoryKind.CVS:
            from polyvcs.vcs.unsupported import CvsRepository

            return CvsRepository(root, command=command)
        else:
            msg = f"Unsupported repository kind: {kind}"
            raise ValueError(msg)
