"""Git repository backend."""

import logging
from collections.abc import Iterable
from pathlib import Path

from polyvcs.vcs.base import Repository
from polyvcs.vcs.factory import RepositoryKind

logger = logging.getLogger(__name__)

CURRENT_BRANCH_MARKER = "* "


class GitRepository(Repository):
    """Git repository driven through the ``git`` binary."""

    kind = RepositoryKind.GIT
    command = "git"

    def init(self, path: str | Path) -> bool:
        """Initialize a new Git repository at path.

        ``git init`` happily reinitializes an existing repository, so an
        existing directory is refused up front without running git.

        Args:
            path: Directory to create the repository in

        Returns:
            True if the repository was created
        """
        if Path(path).is_dir():
            logger.info("Refusing to run git init: %s already exists", path)
            return False
        return super().init(path)

    @staticmethod
    def branches_args() -> list[str]:
        """Arguments that list local and remote-tracking branches."""
        return ["branch", "-a"]

    @staticmethod
    def parse_branches(lines: Iterable[str]) -> list[str]:
        """Parse ``git branch -a`` output.

        Leading whitespace is dropped and the ``* `` marker of the checked
        out branch is removed; remote lines such as
        ``remotes/origin/HEAD -> origin/main`` are kept as printed.
        """
        branches = []
        for line in lines:
            name = line.lstrip()
            if not name:
                continue
            if name.startswith(CURRENT_BRANCH_MARKER):
                name = name[len(CURRENT_BRANCH_MARKER) :]
            branches.append(name)
        return branches
