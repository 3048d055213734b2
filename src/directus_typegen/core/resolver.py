"""
Name resolver - makes collection display keys unique.

Directus tables such as "profile" and "user_profile" (or a table whose
English translation reads "Profiles") can produce the same PascalCase key.
For every such collision the best matching table keeps the key and the
others are rekeyed from their own table name.
"""

from __future__ import annotations

import logging

from .defs import CollectionDef
from .errors import NameCollisionError, NameResolutionError
from .utils import to_display_key

logger = logging.getLogger(__name__)


def group_by_key(collections: dict[str, CollectionDef]) -> dict[str, list[CollectionDef]]:
    """Group collections by display key, keeping first-appearance order."""
    groups: dict[str, list[CollectionDef]] = {}
    for collection in collections.values():
        groups.setdefault(collection.key, []).append(collection)
    return groups


def pick_best_match(key: str, candidates: list[CollectionDef]) -> CollectionDef:
    """
    Choose the collection that keeps a colliding key.

    Priority:
    1. table equals the key (case-insensitive)
    2. table starts with the key (case-insensitive)
    3. shortest table name, first seen on ties
    """
    if not candidates:
        raise NameResolutionError(key)

    lower_key = key.lower()
    ordered = sorted(candidates, key=lambda col: len(col.table))

    for collection in ordered:
        if collection.table.lower() == lower_key:
            return collection
    for collection in ordered:
        if collection.table.lower().startswith(lower_key):
            return collection
    return ordered[0]


def resolve_names(collections: dict[str, CollectionDef]) -> dict[str, CollectionDef]:
    """
    Rewrite display keys so that every collection has a unique one.

    Mutates the collections in place and returns the same mapping.

    Raises:
        NameResolutionError: a collision group is empty
        NameCollisionError: keys still collide after rekeying
    """
    for key, group in group_by_key(collections).items():
        if len(group) < 2:
            continue

        best_match = pick_best_match(key, group)
        for collection in group:
            if collection is best_match:
                continue
            collection.key = to_display_key(collection.table, singleton=collection.singleton)
            logger.info(
                f"Renamed {collection.table} to {collection.key} "
                f"({best_match.table} keeps {key})"
            )

    for key, group in group_by_key(collections).items():
        if len(group) > 1:
            raise NameCollisionError(key, [col.table for col in group])

    return collections
