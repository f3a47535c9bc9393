"""Authentication environment configuration for the Claude command-line client."""

from ._version import __version__


__all__ = ["__version__"]
