"""
Runtime module - HTTP access to the Directus server.
"""

from __future__ import annotations

from .directus_client import DirectusClient

__all__ = [
    "DirectusClient",
]
