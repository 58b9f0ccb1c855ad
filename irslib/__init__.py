"""Swap leg expansion and pricing environment library."""

from irslib.swap import __version__

__all__ = ["__version__"]
