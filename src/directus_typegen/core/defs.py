"""
Core dataclass definitions for directus-typegen.

These define the normalized schema the type renderer works on:
collections, their fields and the relations between them.
"""

from __future__ import annotations


from dataclasses import dataclass, field


@dataclass
class RelationDef:
    """Reference from a field to another collection."""
    table: str  # target table name
    multiple: bool = False  # o2m / m2m / translations / files
    is_m2m: bool = False  # informational, output shape is the same as o2m


@dataclass
class FieldDef:
    """Definition of a collection field."""
    key: str  # backend field name, verbatim
    required: bool = False
    nullable: bool = False
    possible_types: list[str] = field(default_factory=list)  # TypeScript type expressions
    relation: RelationDef | None = None


@dataclass
class CollectionDef:
    """Definition of a collection as it appears in generated code."""
    table: str  # immutable key into the backend
    key: str  # PascalCase display key, unique after name resolution
    singleton: bool = False
    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class NormalizedSchema:
    """Output of the schema normalizer."""
    collections: dict[str, CollectionDef] = field(default_factory=dict)  # table -> collection
    id_types: dict[str, str] = field(default_factory=dict)  # table -> primary key type
    reverse_relations: dict[tuple[str, str], str] = field(default_factory=dict)  # (collection, field) -> table


@dataclass(frozen=True)
class GeneratorOptions:
    """Options threaded through normalization and rendering."""
    type_name: str = "DirectusTypes"
    legacy: bool = False  # no array wrapping in the registry, no CollectionNames enum
    new_types: bool = False  # tag datetime/json/csv fields for DirectusToPrimitive
