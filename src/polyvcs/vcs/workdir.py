"""Scoped change of the process working directory."""

import logging
import os
from pathlib import Path
from types import TracebackType

logger = logging.getLogger(__name__)


class WorkingDirectoryScope:
    """Change into a directory for the duration of a ``with`` block.

    The previous working directory is restored when the block exits, also
    when it exits with an exception. The working directory is process-wide
    state, so scopes must not be used concurrently from several threads.

    Example:
        with WorkingDirectoryScope(repo.root):
            subprocess.run(["make"], check=True)
    """

    def __init__(self, target: str | Path) -> None:
        """Initialize the scope.

        Args:
            target: Directory to change into on entry
        """
        self.target = Path(target)
        self.previous: str | None = None

    def enter(self) -> "WorkingDirectoryScope":
        """Record the current directory and change into the target.

        Raises:
            RuntimeError: If the scope was already entered and not restored
        """
        if self.previous is not None:
            msg = f"Working directory scope for {self.target} is already active"
            raise RuntimeError(msg)
        previous = os.getcwd()
        os.chdir(self.target)
        self.previous = previous
        logger.debug("Changed working directory to %s", self.target)
        return self

    def restore(self) -> None:
        """Change back to the recorded directory.

        Only the first call after enter() has an effect.
        """
        if self.previous is None:
            return
        previous, self.previous = self.previous, None
        os.chdir(previous)
        logger.debug("Restored working directory to %s", previous)

    def __enter__(self) -> "WorkingDirectoryScope":
        """Enter the scope, changing into the target directory."""
        return self.enter()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Leave the scope, restoring the previous directory."""
        self.restore()
