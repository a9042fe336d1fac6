"""Plebtext - segmentation of decentralized social notes into typed content."""

try:
    from importlib.metadata import version

    __version__ = version("plebtext")
except Exception:
    __version__ = "0.0.0-dev"
