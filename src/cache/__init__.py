# src/cache/__init__.py — v1
"""Persistent puzzle input store."""
