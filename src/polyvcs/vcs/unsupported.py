"""Placeholder backends for version control systems without an implementation.

These classes can be selected (the factory returns them for ``.svn`` and
``.cvs`` directories) but every operation raises BackendNotImplementedError.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import NoReturn

from polyvcs.vcs.base import Repository
from polyvcs.vcs.exceptions import BackendNotImplementedError
from polyvcs.vcs.factory import RepositoryKind


class PlaceholderRepository(Repository):
    """Repository whose backend operations are not implemented."""

    def _not_implemented(self, operation: str) -> NoReturn:
        msg = f"{self.kind.display_name} support is not implemented ({operation})"
        raise BackendNotImplementedError(msg)

    def init(self, path: str | Path) -> bool:
        """Raise BackendNotImplementedError."""
        self._not_implemented("init")

    def branches(self) -> list[str]:
        """Raise BackendNotImplementedError."""
        self._not_implemented("branches")

    @staticmethod
    def parse_branches(lines: Iterable[str]) -> list[str]:
        """Raise BackendNotImplementedError."""
        msg = "Branch parsing is not implemented for this backend"
        raise BackendNotImplementedError(msg)


class SubversionRepository(PlaceholderRepository):
    """Subversion placeholder."""

    kind = RepositoryKind.SUBVERSION
    command = "svn"


class CvsRepository(PlaceholderRepository):
    """CVS placeholder."""

    kind = RepositoryKind.CVS
    command = "cvs"
