"""StyleMorph: restyle a small set of HTML documents from one style request."""

from stylemorph.version import __version__

__all__ = ["__version__"]
