"""
Custom exceptions for directus-typegen.
"""

from __future__ import annotations

from typing import Optional


class TypegenError(Exception):
    """Base exception for all directus-typegen errors."""
    pass


class NameResolutionError(TypegenError):
    """Raised when a collision group has no collection to keep its key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No best match for key {key}")


class NameCollisionError(TypegenError):
    """Raised when two tables still share a display key after rekeying."""

    def __init__(self, key: str, tables: list[str]):
        self.key = key
        self.tables = tables
        super().__init__(f"Display key '{key}' is used by several tables: {', '.join(tables)}")


class ConfigError(TypegenError):
    """Raised when the run configuration is incomplete or invalid."""
    pass


class DirectusRequestError(TypegenError):
    """Raised when a call to the Directus server fails."""

    def __init__(self, endpoint: str, status_code: int, message: str, host: Optional[str] = None):
        self.endpoint = endpoint
        self.status_code = status_code
        self.host = host
        where = f"{host.rstrip('/')}{endpoint}" if host else endpoint
        super().__init__(f"Request to '{where}' returned {status_code}: {message}")
