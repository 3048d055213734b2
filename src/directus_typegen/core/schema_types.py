"""
Pydantic models for Directus schema metadata.

These mirror the payloads of GET /collections, /fields and /relations.
Unknown keys are ignored, so newer server versions parse without changes.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- /fields ---

class FieldSchema(BaseModel):
    """Database-level information about a field."""
    is_nullable: Optional[bool] = False
    is_primary_key: Optional[bool] = False
    foreign_key_table: Optional[str] = None


class FieldChoice(BaseModel):
    """
    Choice entry of a select interface.

    Directus stores either bare values or {"text": ..., "value": ...} objects.
    """
    text: Optional[str] = None
    value: Any = None


class NestedFieldMeta(BaseModel):
    required: Optional[bool] = False


class NestedFieldInfo(BaseModel):
    """Sub-field definition of a repeater (json list) interface."""
    field: str
    type: Optional[str] = None
    meta: Optional[NestedFieldMeta] = None


class FieldOptions(BaseModel):
    """Interface options; only the parts that affect typing are kept."""
    choices: Optional[list[Union[FieldChoice, str, int, float, bool]]] = None
    fields: Optional[list[NestedFieldInfo]] = None


class FieldMeta(BaseModel):
    """Directus-level (app) information about a field."""
    required: Optional[bool] = False
    interface: Optional[str] = None
    special: Optional[list[str]] = None
    options: Optional[FieldOptions] = None


class FieldInfo(BaseModel):
    """
    One entry of GET /fields.

    Example:
    {
        "collection": "authors",
        "field": "books",
        "type": "alias",
        "schema": null,
        "meta": {"special": ["o2m"], "required": false}
    }
    """
    model_config = ConfigDict(populate_by_name=True)

    collection: str
    field: str
    type: str
    schema_: Optional[FieldSchema] = Field(default=None, alias="schema")
    meta: Optional[FieldMeta] = None

    @property
    def special(self) -> list[str]:
        if self.meta is None or not self.meta.special:
            return []
        return self.meta.special

    @property
    def is_primary_key(self) -> bool:
        return bool(self.schema_ and self.schema_.is_primary_key)


# --- /relations ---

class RelationMeta(BaseModel):
    many_collection: Optional[str] = None
    many_field: Optional[str] = None
    one_collection: Optional[str] = None
    one_field: Optional[str] = None


class RelationInfo(BaseModel):
    """One entry of GET /relations."""
    collection: str
    field: str
    related_collection: Optional[str] = None
    meta: Optional[RelationMeta] = None


# --- /collections ---

class CollectionTranslation(BaseModel):
    language: Optional[str] = None
    translation: Optional[str] = None
    singular: Optional[str] = None
    plural: Optional[str] = None


class CollectionMeta(BaseModel):
    singleton: Optional[bool] = False
    translations: Optional[list[CollectionTranslation]] = None


class CollectionInfo(BaseModel):
    """
    One entry of GET /collections.

    A missing meta block marks a table Directus does not manage.
    """
    collection: str
    meta: Optional[CollectionMeta] = None

    @property
    def singleton(self) -> bool:
        return bool(self.meta and self.meta.singleton)

    def english_name(self) -> Optional[str]:
        """Return the English display name, if one is configured."""
        if self.meta is None or not self.meta.translations:
            return None
        for item in self.meta.translations:
            if item.language and item.language.lower().startswith("en") and item.translation:
                return item.translation
        return None


# --- Snapshot ---

class SchemaSnapshot(BaseModel):
    """The three metadata lists of one server, fetched together."""
    collections: list[CollectionInfo] = Field(default_factory=list)
    fields: list[FieldInfo] = Field(default_factory=list)
    relations: list[RelationInfo] = Field(default_factory=list)

    @classmethod
    def from_payloads(
        cls,
        collections: list[dict[str, Any]],
        fields: list[dict[str, Any]],
        relations: list[dict[str, Any]],
    ) -> "SchemaSnapshot":
        """Build a snapshot from the raw `data` lists of the API."""
        return cls.model_validate(
            {"collections": collections, "fields": fields, "relations": relations}
        )
