"""Version Control System abstraction for polyvcs.

This module provides a unified interface for working with different
version control systems (Git, Mercurial, Bazaar) through their
command-line tools.
"""

from polyvcs.vcs.base import Repository
from polyvcs.vcs.exceptions import (
    BackendNotImplementedError,
    InvocationError,
    RepositoryRootError,
    VCSError,
)
from polyvcs.vcs.factory import RepositoryFactory, RepositoryKind, detect_repository_kind
from polyvcs.vcs.process import CommandResult, resolve_command, run_command
from polyvcs.vcs.workdir import WorkingDirectoryScope

__all__ = [
    "BackendNotImplementedError",
    "CommandResult",
    "InvocationError",
    "Repository",
    "RepositoryFactory",
    "RepositoryKind",
    "RepositoryRootError",
    "VCSError",
    "WorkingDirectoryScope",
    "detect_repository_kind",
    "resolve_command",
    "run_command",
]
