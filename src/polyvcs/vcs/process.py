"""External command execution for VCS backends."""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NamedTuple

from polyvcs.vcs.exceptions import InvocationError

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Result of an external command."""

    success: bool
    stdout: str
    stderr: str
    exit_code: int | None = None

    @property
    def stdout_lines(self) -> list[str]:
        """Standard output split into lines, without line terminators."""
        return self.stdout.splitlines()

    @property
    def stderr_lines(self) -> list[str]:
        """Standard error split into lines, without line terminators."""
        return self.stderr.splitlines()


def resolve_command(
    command: str,
    environ: Mapping[str, str] | None = None,
    windows: bool | None = None,
) -> str:
    """Locate an executable on the search path.

    On POSIX systems every ``PATH`` entry is checked for a file named exactly
    ``command``. On Windows each extension from ``PATHEXT`` is tried against
    every ``PATH`` entry before moving on to the next extension.

    Args:
        command: Bare command name (e.g. ``"git"``)
        environ: Environment to read ``PATH``/``PATHEXT`` from (default: os.environ)
        windows: Force Windows lookup rules (default: detect from os.name)

    Returns:
        Path to the first match, or ``command`` unchanged if nothing matched
        so the process launcher can report the failure itself.
    """
    if environ is None:
        environ = os.environ
    if windows is None:
        windows = os.name == "nt"

    search_path = environ.get("PATH")
    if search_path is None:
        return command

    entries = [entry for entry in search_path.split(";" if windows else ":") if entry]

    if windows:
        extensions = [ext for ext in environ.get("PATHEXT", "").split(";") if ext]
    else:
        extensions = [""]

    for ext in extensions:
        for entry in entries:
            candidate = Path(entry) / f"{command}{ext}"
            if candidate.is_file():
                return str(candidate)

    return command


def run_command(
    command: str,
    args: Sequence[str],
    cwd: str | Path | None = None,
) -> CommandResult:
    """Run an external command and capture its output.

    The call blocks until the child exits. Standard input is redirected from
    the null device so the child never waits on the caller's terminal.

    Args:
        command: Bare command name, resolved with resolve_command()
        args: Arguments passed to the command, one list item per argument
        cwd: Working directory for the child process (default: inherit)

    Returns:
        A CommandResult with the outcome.

    Raises:
        InvocationError: If the command could not be started
    """
    argv = [resolve_command(command), *args]
    logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd)

    try:
        completed = subprocess.run(  # noqa: S603
            argv,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            cwd=cwd,
            check=False,
        )
    except OSError as e:
        msg = f"Unable to run {command}: {e}"
        raise InvocationError(msg) from e

    if completed.returncode != 0:
        logger.debug("%s exited with code %s: %s", command, completed.returncode, completed.stderr.strip())

    return CommandResult(
        success=completed.returncode == 0,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
        exit_code=completed.returncode,
    )
