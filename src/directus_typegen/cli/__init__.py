"""
directus-typegen CLI - Command line entry point.
"""

from __future__ import annotations

from .main import main, app

__all__ = ["main", "app"]
