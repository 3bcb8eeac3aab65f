"""
Naming helpers shared by the model and the report.
"""

import re

# Splits text into words on camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


def _split_into_words(text: str) -> list[str]:
    return _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " ").replace(".", " "))


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case, camelCase or dotted text to PascalCase.

    Examples:
        "pet_id" -> "PetId"
        "petId" -> "PetId"
        "store-inventory" -> "StoreInventory"
        "v2" -> "V2"
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text) if word)


def pluralize(count: int, noun: str) -> str:
    """Count followed by the noun, naively pluralized ("3 references")."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
