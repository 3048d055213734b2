"""
Schema normalizer - converts Directus metadata to the normalized schema.

Builds one CollectionDef per user-facing table with its fields annotated
with nullability, requiredness, relation target and candidate TypeScript
types. Lookup misses are logged and only degrade the affected field.

Usage:
    from directus_typegen.core.normalizer import SchemaNormalizer

    normalizer = SchemaNormalizer(GeneratorOptions(new_types=True))
    schema = normalizer.normalize(snapshot)
"""

from __future__ import annotations

import logging
from typing import Optional

from .defs import CollectionDef, FieldDef, GeneratorOptions, NormalizedSchema, RelationDef
from .schema_types import CollectionInfo, FieldInfo, FieldMeta, RelationInfo, SchemaSnapshot
from .type_maps import (
    FIELDS_TO_AVOID_CHOICES,
    FIXED_OVERRIDES,
    MULTIPLE_SPECIALS,
    VIRTUAL_SPECIALS,
    get_type_map,
)
from .utils import to_display_key

logger = logging.getLogger(__name__)


def build_reverse_relations(relations: list[RelationInfo]) -> dict[tuple[str, str], str]:
    """
    Index relations by the field that sees them from the "one" side.

    Returns (one_collection, one_field) -> many_collection, so an o2m or m2m
    alias field can find the table holding its rows.
    """
    index: dict[tuple[str, str], str] = {}
    for relation in relations:
        meta = relation.meta
        if meta is None:
            continue
        one_field = meta.one_field or meta.many_field
        if meta.many_collection == relation.collection and meta.one_collection and one_field:
            index[(meta.one_collection, one_field)] = relation.collection
    return index


def _choice_literal(choice, quoted: bool) -> str:
    value = getattr(choice, "value", choice)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return f"'{value}'" if quoted else str(value)


class SchemaNormalizer:
    """
    Normalizes a schema snapshot.

    Steps:
    - Reverse relation index from /relations
    - One pass over /fields in declared order
    - Collections created on first sighting of their table
    """

    def __init__(self, options: GeneratorOptions | None = None):
        self.options = options or GeneratorOptions()
        self.types = get_type_map(self.options.new_types)

    def normalize(self, snapshot: SchemaSnapshot) -> NormalizedSchema:
        """
        Normalize a snapshot.

        Args:
            snapshot: Collections, fields and relations of one server

        Returns:
            NormalizedSchema with collections in order of first appearance
        """
        schema = NormalizedSchema(
            reverse_relations=build_reverse_relations(snapshot.relations),
        )
        collections_info = {info.collection: info for info in snapshot.collections}

        for field_info in snapshot.fields:
            if field_info.type == "alias" and VIRTUAL_SPECIALS.intersection(field_info.special):
                continue

            if field_info.is_primary_key:
                self._register_id_type(schema, field_info)

            collection = schema.collections.get(field_info.collection)
            if collection is None:
                collection = self._create_collection(
                    field_info.collection, collections_info.get(field_info.collection)
                )
                if collection is None:
                    continue
                schema.collections[collection.table] = collection

            collection.fields.append(self._build_field(field_info, schema.reverse_relations))

        return schema

    def _register_id_type(self, schema: NormalizedSchema, field_info: FieldInfo):
        """Record the primary key type used to type foreign keys to this table."""
        id_type = self.types.get(field_info.type)
        if id_type:
            schema.id_types[field_info.collection] = id_type
        else:
            logger.warning(f"Missing type for {field_info.type} (primary key of {field_info.collection})")

    def _create_collection(
        self,
        table: str,
        info: Optional[CollectionInfo],
    ) -> CollectionDef | None:
        """Create a collection, or None for tables Directus does not manage."""
        if info is not None and info.meta is None:
            logger.debug(f"Skipping unmanaged table {table}")
            return None

        singleton = bool(info and info.singleton)
        name = (info.english_name() if info else None) or table
        return CollectionDef(
            table=table,
            key=to_display_key(name, singleton=singleton),
            singleton=singleton,
        )

    def _build_field(
        self,
        field_info: FieldInfo,
        reverse_relations: dict[tuple[str, str], str],
    ) -> FieldDef:
        """Build a field with its flags, relation and candidate types."""
        schema = field_info.schema_
        field = FieldDef(
            key=field_info.field,
            required=bool(field_info.meta and field_info.meta.required),
            nullable=bool(schema and schema.is_nullable and not schema.is_primary_key),
        )

        special = field_info.special
        if field_info.type == "alias" and MULTIPLE_SPECIALS.intersection(special):
            table = reverse_relations.get((field_info.collection, field_info.field))
            if table:
                field.relation = RelationDef(
                    table=table,
                    multiple=True,
                    is_m2m="m2m" in special,
                )
            else:
                logger.warning(
                    f"Table not found for relation {field_info.field} ({field_info.collection})"
                )
        elif schema and schema.foreign_key_table:
            field.relation = RelationDef(table=schema.foreign_key_table)
        else:
            field.possible_types = self.get_types(field_info.field, field_info.type, field_info.meta)

        override = FIXED_OVERRIDES.get((field_info.collection, field_info.field))
        if override:
            field.possible_types.append(override)

        return field

    def get_types(
        self,
        field_name: str,
        directus_type: str,
        meta: Optional[FieldMeta] = None,
    ) -> list[str]:
        """
        Compute candidate TypeScript types for a non-relational field.

        Args:
            field_name: Field name, checked against the choice exclusion set
            directus_type: Directus type tag (string, integer, json, ...)
            meta: Field meta with interface options

        Returns:
            List of type expressions, never empty
        """
        types: list[str] = []
        base_type = self.types.get(directus_type)
        options = meta.options if meta else None
        narrowable = field_name not in FIELDS_TO_AVOID_CHOICES

        if narrowable and directus_type != "json" and options and options.choices:
            # Literal types, unquoted for numbers and null
            quoted = base_type != "number"
            types.extend(_choice_literal(choice, quoted) for choice in options.choices)
        elif narrowable and directus_type == "json" and options and options.fields:
            types.append(self._nested_object_type(options))
            if base_type:
                types.append(base_type)
        elif base_type:
            types.append(base_type)
        else:
            logger.warning(f"Type {directus_type} missing for field {field_name}")
            types.append("unknown")

        return types

    def _nested_object_type(self, options) -> str:
        """Inline object type for repeater sub-fields with a mapped type."""
        members = [
            f"{item.field}{'' if item.meta and item.meta.required else '?'}: {self.types[item.type]};"
            for item in options.fields
            if item.type in self.types
        ]
        return "{\n  " + "\n    ".join(members) + "\n}[]"


def normalize_schema(snapshot: SchemaSnapshot, options: GeneratorOptions | None = None) -> NormalizedSchema:
    """
    Convenience function to normalize a snapshot.

    Args:
        snapshot: Collections, fields and relations of one server
        options: Generator options, selects the type table

    Returns:
        NormalizedSchema
    """
    return SchemaNormalizer(options).normalize(snapshot)
