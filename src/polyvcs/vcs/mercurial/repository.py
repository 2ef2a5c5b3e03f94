"""Mercurial repository backend."""

from collections.abc import Iterable

from polyvcs.vcs.base import Repository
from polyvcs.vcs.factory import RepositoryKind


class MercurialRepository(Repository):
    """Mercurial repository driven through the ``hg`` binary.

    ``hg init`` aborts with a non-zero exit code when the target is already a
    repository, so no pre-check is needed.
    """

    kind = RepositoryKind.MERCURIAL
    command = "hg"

    @staticmethod
    def parse_branches(lines: Iterable[str]) -> list[str]:
        """Parse ``hg branches`` output.

        Each line looks like ``default      3:abcdef123456 (inactive)``; the
        name is everything before the first space.
        """
        return [line.split(" ", 1)[0] for line in lines if line.strip()]
