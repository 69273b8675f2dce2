# src/fetch/__init__.py — v1
"""Remote puzzle input retrieval."""
