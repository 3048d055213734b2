"""
TypeScript types generator from the normalized Directus schema.

Generates:
- One object type per collection
- The registry type mapping table names to collection types
- CollectionNames enum (unless legacy)
- DirectusToPrimitive helper (with new types)
"""

from __future__ import annotations

import logging

from .defs import CollectionDef, FieldDef, GeneratorOptions, NormalizedSchema

logger = logging.getLogger(__name__)


HEADER = "/* eslint-disable @typescript-eslint/consistent-type-definitions */\n"

NEW_TYPES_HELPER = """
type JsonPrimitive = null | boolean | number | string;
type JsonValue = JsonPrimitive | JsonPrimitive[] | { [key: string]: JsonValue };

type TypesMap = {
  json: JsonValue;
  csv: string;
  datetime: string;
};

export type DirectusToPrimitive<
  Item extends Record<string, unknown>,
> = {
  [F in keyof Item]: Extract<Item[F], keyof TypesMap> extends infer A
      ? A[] extends never[]
        ? Item[F]
        : A extends keyof TypesMap
          ? TypesMap[A] | Exclude<Item[F], A>
          : Item[F]
      : Item[F];
};
"""


def render_type_expression(
    field: FieldDef,
    collections: dict[str, CollectionDef],
    id_types: dict[str, str],
) -> str:
    """
    Render the TypeScript type of a field.

    Relations contribute the target's primary key type and its collection
    type. To-many relations are arrays and never get "| null": with several
    members each one gets "[]", with a single member the whole type does.
    """
    members = list(field.possible_types)
    relation = field.relation
    if relation:
        target = collections.get(relation.table)
        if target:
            id_type = id_types.get(relation.table)
            if id_type:
                members.append(id_type)
            members.append(target.key)
        else:
            logger.warning(f"Collection not found for table {relation.table}")

    # Overrides may repeat the relation target
    members = list(dict.fromkeys(members)) or ["unknown"]

    multiple = bool(relation and relation.multiple)
    add_null = field.nullable and not multiple
    many = len(members) > 1

    if many and not add_null and multiple:
        text = " | ".join(f"{member}[]" for member in members)
    else:
        text = " | ".join(members)
        if many and add_null:
            text = f"({text})"
        if multiple:
            text = f"{text}[]"

    return f"{text} | null" if add_null else text


def generate_collection_type(
    collection: CollectionDef,
    collections: dict[str, CollectionDef],
    id_types: dict[str, str],
) -> list[str]:
    """Generate the object type of one collection."""
    lines = [f"export type {collection.key} = {{"]

    for field in collection.fields:
        optional = "" if field.required or field.key == "id" else "?"
        ts_type = render_type_expression(field, collections, id_types)
        lines.append(f"  {field.key}{optional}: {ts_type};")

    lines.append("};\n")
    return lines


def generate_registry_type(
    collections: list[CollectionDef],
    type_name: str,
    legacy: bool = False,
) -> list[str]:
    """Generate the type mapping every table to its collection type."""
    lines = [f"export type {type_name} = {{"]

    for collection in collections:
        array = "" if legacy or collection.singleton else "[]"
        lines.append(f"  {collection.table}: {collection.key}{array};")

    lines.append("};\n")
    return lines


def generate_collection_names_enum(collections: list[CollectionDef]) -> list[str]:
    """Generate the CollectionNames enum of all table names."""
    lines = ["export enum CollectionNames {"]

    last = len(collections) - 1
    for i, collection in enumerate(collections):
        comma = "," if i != last else ""
        lines.append(f"  {collection.table} = '{collection.table}'{comma}")

    lines.append("}\n")
    return lines


def generate_typescript(schema: NormalizedSchema, options: GeneratorOptions | None = None) -> str:
    """
    Generate TypeScript types from a normalized, name-resolved schema.

    Args:
        schema: Output of the normalizer after name resolution
        options: Registry type name, legacy and new types flags

    Returns:
        TypeScript source code as string
    """
    options = options or GeneratorOptions()
    collections = list(schema.collections.values())

    lines: list[str] = [HEADER]

    for collection in collections:
        lines.extend(generate_collection_type(collection, schema.collections, schema.id_types))

    lines.extend(generate_registry_type(collections, options.type_name, options.legacy))

    if not options.legacy:
        lines.extend(generate_collection_names_enum(collections))

    if options.new_types:
        lines.append(NEW_TYPES_HELPER)

    return "\n".join(lines)
