# src/__init__.py — v1
"""rudolf: fetch-or-cache accessor for Advent of Code puzzle inputs."""

from rudolf.version import __version__

__all__ = ["__version__"]
