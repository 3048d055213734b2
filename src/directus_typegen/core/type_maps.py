"""
Directus field type -> TypeScript type tables.

Two tables exist. The default one maps everything to plain primitives.
The "new types" table tags datetime, json and csv fields with string
literal markers which the generated DirectusToPrimitive helper resolves.
"""

from __future__ import annotations


DEFAULT_TYPES: dict[str, str] = {
    "string": "string",
    "uuid": "string",
    "timestamp": "string",
    "time": "string",
    "dateTime": "string",
    "date": "string",
    "integer": "number",
    "boolean": "boolean",
    "text": "string",
    "json": "string",
    "alias": "number",
    "csv": "string",
    "bigInteger": "number",
    "hash": "string",
    "float": "number",
}

NEW_TYPES: dict[str, str] = {
    **DEFAULT_TYPES,
    "timestamp": "'datetime'",
    "dateTime": "'datetime'",
    "date": "'datetime'",
    "json": "'json'",
    "csv": "'csv'",
}

# Fields whose choices describe something other than the stored value
FIELDS_TO_AVOID_CHOICES = frozenset({"auth_password_policy"})

# Alias specials that make a field a to-many relation
MULTIPLE_SPECIALS = frozenset({"o2m", "m2m", "translations", "files"})

# Alias specials for presentation-only fields without stored data
VIRTUAL_SPECIALS = frozenset({"group", "no-data"})

# Built-in fields general inference cannot type: (collection, field) -> extra type
FIXED_OVERRIDES: dict[tuple[str, str], str] = {
    ("directus_users", "avatar"): "DirectusFile",
}


def get_type_map(new_types: bool = False) -> dict[str, str]:
    """Return the type table selected by the new_types option."""
    return NEW_TYPES if new_types else DEFAULT_TYPES
