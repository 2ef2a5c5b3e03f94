"""Common VCS exceptions for polyvcs.

Backend failures (a binary that ran but exited non-zero) are reported as
plain return values, not exceptions. The classes below cover the cases that
must propagate to the caller.
"""


class VCSError(Exception):
    """Base exception for all VCS-related errors."""


class InvocationError(VCSError):
    """Raised when a VCS binary could not be started."""


class BackendNotImplementedError(VCSError):
    """Raised when an operation is called on a placeholder backend."""


class RepositoryRootError(VCSError):
    """Raised when an operation needs a repository root that is not set."""
