"""Mercurial VCS implementation for polyvcs."""

from polyvcs.vcs.mercurial.repository import MercurialRepository

__all__ = [
    "MercurialRepository",
]
