"""Git VCS implementation for polyvcs."""

from polyvcs.vcs.git.repository import GitRepository

__all__ = [
    "GitRepository",
]
