"""
Name Decomposer

Splits a detected full name into title, first name and last name using
the title taxonomy in dictionaries/title_dictionary.py.

    "Captain Smith"        -> ("Captain", "",          "Smith")
    "Captain John Smith"   -> ("Captain", "John",      "Smith")
    "Lady Mary"            -> ("Lady",    "Mary",      "")
    "John Alan Smith"      -> ("",        "John Alan", "Smith")

Title detection only looks at the FIRST word. Without a title match (or
with detection disabled) the standard parse applies: first word is the
first name, last word is the last name, middle words stay with the first
name.
"""

from dataclasses import dataclass
from typing import Optional

from dictionaries.title_dictionary import (
    TITLE_CATEGORIES,
    TITLE_CATEGORY_ORDER,
    LAST_NAME_BINDING_CATEGORIES,
)


@dataclass(frozen=True)
class NameParts:
    title: str
    first_name: str
    last_name: str


_TITLE_LOOKUP = {
    category: frozenset(title.lower() for title in TITLE_CATEGORIES[category])
    for category in TITLE_CATEGORY_ORDER
}


def find_title_category(word: str) -> Optional[str]:
    """
    Return the category of a title word, or None.

    Case-insensitive; one trailing period is ignored ("Dr." == "dr").
    Categories are checked in TITLE_CATEGORY_ORDER.
    """
    if not word:
        return None

    candidate = word[:-1] if word.endswith(".") else word
    candidate = candidate.lower()
    for category in TITLE_CATEGORY_ORDER:
        if candidate in _TITLE_LOOKUP[category]:
            return category
    return None


def split_standard_name(parts: list[str]) -> tuple[str, str]:
    """Standard parse of a title-less name into (first_name, last_name)."""
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return " ".join(parts[:-1]), parts[-1]


def _split_after_title(category: str, rest: list[str]) -> tuple[str, str]:
    if len(rest) == 1:
        if category in LAST_NAME_BINDING_CATEGORIES:
            return "", rest[0]
        return rest[0], ""
    return rest[0], " ".join(rest[1:])


def decompose_name(full_name: str, detect_titles: bool = True) -> NameParts:
    """
    Split a full name into NameParts.

    Args:
        full_name: Name as detected (whitespace is normalised here)
        detect_titles: Whether to treat a leading title word specially

    Returns:
        NameParts(title, first_name, last_name)
    """
    parts = full_name.split()

    if len(parts) <= 1:
        first_name, _ = split_standard_name(parts)
        return NameParts(title="", first_name=first_name, last_name="")

    if detect_titles:
        category = find_title_category(parts[0])
        if category is not None:
            first_name, last_name = _split_after_title(category, parts[1:])
            return NameParts(title=parts[0], first_name=first_name, last_name=last_name)

    first_name, last_name = split_standard_name(parts)
    return NameParts(title="", first_name=first_name, last_name=last_name)
