"""
Shared fixtures: a small Directus schema with authors, books and tags.

The payloads follow the shape of GET /collections, /fields and /relations.
"""
import pytest

from directus_typegen.core.schema_types import SchemaSnapshot


def pk_field(collection, name="id", type="uuid"):
    return {
        "collection": collection,
        "field": name,
        "type": type,
        "schema": {"is_nullable": False, "is_primary_key": True},
        "meta": {"required": False},
    }


def make_field(collection, name, type="string", nullable=True, required=False,
               special=None, options=None, fk=None):
    return {
        "collection": collection,
        "field": name,
        "type": type,
        "schema": None if type == "alias" else {
            "is_nullable": nullable,
            "is_primary_key": False,
            "foreign_key_table": fk,
        },
        "meta": {"required": required, "special": special, "options": options},
    }


@pytest.fixture
def collections_payload():
    return [
        {"collection": "authors", "meta": {"singleton": False}},
        {"collection": "books", "meta": {"singleton": False}},
        {"collection": "tags", "meta": {"singleton": False}},
        {"collection": "books_tags", "meta": {"singleton": False, "hidden": True}},
        {"collection": "settings", "meta": {"singleton": True}},
    ]


@pytest.fixture
def fields_payload():
    return [
        pk_field("authors"),
        make_field("authors", "name", nullable=False, required=True),
        make_field("authors", "books", type="alias", special=["o2m"]),
        pk_field("books"),
        make_field("books", "title"),
        make_field("books", "author", type="uuid", fk="authors"),
        make_field("books", "tags", type="alias", special=["m2m"]),
        make_field("books", "details", type="alias", special=["group"]),
        pk_field("tags", type="integer"),
        make_field("tags", "label", nullable=False, required=True),
        pk_field("books_tags", type="integer"),
        make_field("books_tags", "books_id", type="uuid", fk="books"),
        make_field("books_tags", "tags_id", type="integer", fk="tags"),
        pk_field("settings", type="integer"),
        make_field("settings", "site_name"),
    ]


@pytest.fixture
def relations_payload():
    return [
        {
            "collection": "books",
            "field": "author",
            "related_collection": "authors",
            "meta": {
                "many_collection": "books",
                "many_field": "author",
                "one_collection": "authors",
                "one_field": "books",
            },
        },
        {
            "collection": "books_tags",
            "field": "books_id",
            "related_collection": "books",
            "meta": {
                "many_collection": "books_tags",
                "many_field": "books_id",
                "one_collection": "books",
                "one_field": "tags",
            },
        },
        {
            "collection": "books_tags",
            "field": "tags_id",
            "related_collection": "tags",
            "meta": {
                "many_collection": "books_tags",
                "many_field": "tags_id",
                "one_collection": "tags",
                "one_field": None,
            },
        },
    ]


@pytest.fixture
def snapshot(collections_payload, fields_payload, relations_payload):
    return SchemaSnapshot.from_payloads(collections_payload, fields_payload, relations_payload)
