"""
Core module - schema models, normalization, name resolution and rendering.
"""

from __future__ import annotations

from .defs import (
    CollectionDef,
    FieldDef,
    GeneratorOptions,
    NormalizedSchema,
    RelationDef,
)
from .errors import (
    ConfigError,
    DirectusRequestError,
    NameCollisionError,
    NameResolutionError,
    TypegenError,
)
from .schema_types import (
    CollectionInfo,
    FieldInfo,
    RelationInfo,
    SchemaSnapshot,
)
from .normalizer import SchemaNormalizer, build_reverse_relations, normalize_schema
from .resolver import resolve_names
from .typescript_generator import generate_typescript, render_type_expression
from .pipeline import generate_types

__all__ = [
    # Definitions
    "CollectionDef",
    "FieldDef",
    "RelationDef",
    "NormalizedSchema",
    "GeneratorOptions",
    # Errors
    "TypegenError",
    "NameResolutionError",
    "NameCollisionError",
    "ConfigError",
    "DirectusRequestError",
    # Schema types
    "CollectionInfo",
    "FieldInfo",
    "RelationInfo",
    "SchemaSnapshot",
    # Normalizer
    "SchemaNormalizer",
    "build_reverse_relations",
    "normalize_schema",
    # Resolver
    "resolve_names",
    # Renderer
    "generate_typescript",
    "render_type_expression",
    # Pipeline
    "generate_types",
]
