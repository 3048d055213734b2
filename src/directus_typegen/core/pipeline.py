"""
Type generation pipeline.

snapshot -> normalized schema -> unique display keys -> TypeScript text
"""

from __future__ import annotations

from .defs import GeneratorOptions
from .normalizer import normalize_schema
from .resolver import resolve_names
from .schema_types import SchemaSnapshot
from .typescript_generator import generate_typescript


def generate_types(snapshot: SchemaSnapshot, options: GeneratorOptions | None = None) -> str:
    """
    Generate the TypeScript declarations for a schema snapshot.

    Pure and deterministic: the same snapshot always yields the same text.

    Raises:
        NameResolutionError, NameCollisionError: display keys cannot be made unique
    """
    options = options or GeneratorOptions()
    schema = normalize_schema(snapshot, options)
    resolve_names(schema.collections)
    return generate_typescript(schema, options)
