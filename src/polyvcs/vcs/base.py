"""Abstract base class for version control system repositories.

This module defines the common interface that all VCS backends
(Git, Mercurial, Bazaar, etc.) implement. Backends only describe the command
lines they need and how to read the tool's output; running the tool is
delegated to an injectable runner.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import ClassVar

from polyvcs.vcs.exceptions import RepositoryRootError
from polyvcs.vcs.factory import RepositoryKind
from polyvcs.vcs.process import CommandResult, run_command

logger = logging.getLogger(__name__)

CommandRunner = Callable[..., CommandResult]


class Repository(ABC):
    """Abstract base class for VCS repositories.

    A repository is bound to its root directory. Every operation spawns at
    most one external process, with the root passed as the child's working
    directory, and keeps nothing open between calls.
    """

    kind: ClassVar[RepositoryKind]
    command: ClassVar[str]

    def __init__(
        self,
        root: str | Path | None = None,
        command: str | None = None,
        runner: CommandRunner = run_command,
    ) -> None:
        """Initialize the repository handle.

        Args:
            root: Repository working directory (set later by init() if omitted)
            command: Binary to invoke instead of the backend default
            runner: Callable used to run the binary (default: run_command)
        """
        self.root = Path(root) if root is not None else None
        self.binary = command or self.command
        self.runner = runner

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={self.root!r})"

    def init(self, path: str | Path) -> bool:
        """Initialize a new repository at path.

        On success the repository is bound to path.

        Args:
            path: Directory to create the repository in

        Returns:
            True if the backend reported success

        Raises:
            InvocationError: If the backend binary could not be started
        """
        result = self._run(self.init_args(str(path)))
        if not result.success:
            logger.info("%s init failed for %s: %s", self.kind.display_name, path, result.stderr.strip())
            return False

        self.root = Path(path)
        return True

    def branches(self) -> list[str]:
        """List branch names in the order the backend prints them.

        Returns:
            Branch names, or an empty list if the backend reported failure

        Raises:
            RepositoryRootError: If the repository has no root
            InvocationError: If the backend binary could not be started
        """
        if self.root is None:
            msg = f"{self.kind.display_name} repository has no root directory"
            raise RepositoryRootError(msg)

        result = self._run(self.branches_args(), cwd=self.root)
        if not result.success:
            logger.warning(
                "%s could not list branches in %s: %s",
                self.kind.display_name,
                self.root,
                result.stderr.strip(),
            )
            return []

        return self.parse_branches(result.stdout_lines)

    def _run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        return self.runner(self.binary, list(args), cwd=cwd)

    @staticmethod
    def init_args(path: str) -> list[str]:
        """Arguments that create a repository at path."""
        return ["init", "--", path]

    @staticmethod
    def branches_args() -> list[str]:
        """Arguments that list the repository's branches."""
        return ["branches"]

    @staticmethod
    @abstractmethod
    def parse_branches(lines: Iterable[str]) -> list[str]:
        """Extract branch names from the branch-listing output.

        Args:
            lines: Output lines of the branch-listing command

        Returns:
            Branch names in output order, duplicates kept
        """
