"""polyvcs: one interface over Git, Mercurial and Bazaar command-line tools."""

__version__ = "0.1.0"
