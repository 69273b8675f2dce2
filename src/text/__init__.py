# src/text/__init__.py — v1
"""Text utilities for puzzle inputs."""
