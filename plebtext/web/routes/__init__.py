"""Route modules for plebtext web API."""

from . import content

__all__ = ["content"]
