"""
Utility functions for directus-typegen.

Includes:
- Word splitting of identifiers and labels
- snake_case conversion of config keys
- Singularization of collection names
- PascalCase display keys for generated types
"""

from __future__ import annotations

import re

import inflect


# =============================================================================
# Case conversion utilities
# =============================================================================

# Pre-compiled regex patterns for better performance
_WORD_PATTERN = re.compile(r'[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+')

_inflector = inflect.engine()

# Endings of words that are already singular (address, status, alias, analysis)
_SINGULAR_ENDING = re.compile(r"(?:ss|[^aou]us|is|alias|gas|t[lm]as)$")


def split_words(text: str) -> list[str]:
    """
    Split an identifier or label into words.

    Examples:
        directus_users -> ["directus", "users"]
        blogPosts -> ["blog", "Posts"]
        HTMLPages -> ["HTML", "Pages"]
        "Blog Posts" -> ["Blog", "Posts"]
    """
    return _WORD_PATTERN.findall(text)


def to_snake_case(name: str) -> str:
    """
    Convert camelCase, kebab-case or snake_case to snake_case.

    Examples:
        typeName -> type_name
        out-file -> out_file
    """
    return "_".join(word.lower() for word in split_words(name))


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


# =============================================================================
# Inflection utilities
# =============================================================================


def singularize(word: str) -> str:
    """
    Return the singular form of an English noun, or the word unchanged.

    Examples:
        books -> book
        categories -> category
        profile -> profile
        address -> address
    """
    if not word or not word.isalpha() or _SINGULAR_ENDING.search(word.lower()):
        return word
    candidate = _inflector.singular_noun(word)
    if candidate and _inflector.plural_noun(candidate) == word:
        return candidate
    return word


def to_display_key(name: str, singleton: bool = False) -> str:
    """
    Build the PascalCase type name for a collection.

    Acronyms are folded, so HTMLPages becomes HtmlPage.

    The last word is singularized unless the collection is a singleton.

    Examples:
        authors -> Author
        user_profiles -> UserProfile
        "Blog Posts" -> BlogPost
        settings (singleton) -> Settings
    """
    words = split_words(name)
    if not words:
        return ""
    if not singleton:
        words[-1] = singularize(words[-1].lower())
    return "".join(_capitalize(word) for word in words)
