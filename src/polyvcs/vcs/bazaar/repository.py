"""Bazaar repository backend."""

from collections.abc import Iterable

from polyvcs.vcs.base import Repository
from polyvcs.vcs.factory import RepositoryKind


class BazaarRepository(Repository):
    """Bazaar repository driven through the ``bzr`` binary."""

    kind = RepositoryKind.BAZAAR
    command = "bzr"

    @staticmethod
    def parse_branches(lines: Iterable[str]) -> list[str]:
        # bzr prints one branch per line with nothing else on it
        return [line for line in lines if line.strip()]
