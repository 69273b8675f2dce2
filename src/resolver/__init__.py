# src/resolver/__init__.py — v1
"""Cache-or-fetch orchestration."""
