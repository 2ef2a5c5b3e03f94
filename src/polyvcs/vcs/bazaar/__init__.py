"""Bazaar VCS implementation for polyvcs."""

from polyvcs.vcs.bazaar.repository import BazaarRepository

__all__ = [
    "BazaarRepository",
]
