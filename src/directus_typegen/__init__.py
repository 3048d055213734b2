"""
directus-typegen - TypeScript types from a live Directus schema.

Reads collections, fields and relations from a Directus server and emits
one object type per collection plus a registry type mapping table names
to those types.

Usage:
    from directus_typegen import DirectusClient, GeneratorOptions, generate_types

    async with DirectusClient("http://localhost:8055") as client:
        await client.login("admin@example.com", "password")
        snapshot = await client.fetch_snapshot()

    source = generate_types(snapshot, GeneratorOptions(type_name="MyCollections"))
"""

from __future__ import annotations

__version__ = "0.2.1"

from .core import (
    CollectionDef,
    CollectionInfo,
    ConfigError,
    DirectusRequestError,
    FieldDef,
    FieldInfo,
    generate_types,
    generate_typescript,
    GeneratorOptions,
    NameCollisionError,
    NameResolutionError,
    normalize_schema,
    NormalizedSchema,
    RelationDef,
    RelationInfo,
    resolve_names,
    SchemaNormalizer,
    SchemaSnapshot,
    TypegenError,
)
from .runtime import DirectusClient

__all__ = [
    # Definitions
    "CollectionDef",
    "FieldDef",
    "RelationDef",
    "NormalizedSchema",
    "GeneratorOptions",
    # Schema types
    "CollectionInfo",
    "FieldInfo",
    "RelationInfo",
    "SchemaSnapshot",
    # Errors
    "TypegenError",
    "NameResolutionError",
    "NameCollisionError",
    "ConfigError",
    "DirectusRequestError",
    # Pipeline
    "SchemaNormalizer",
    "normalize_schema",
    "resolve_names",
    "generate_typescript",
    "generate_types",
    # Runtime
    "DirectusClient",
]
