"""
Canonical character classes for password generation.

All classes live in the Basic Latin block and are pairwise disjoint.
"""

import string
from enum import Enum
from typing import Tuple


class CharacterClass(Enum):
    """A canonical character class and its characters."""

    UPPER = string.ascii_uppercase
    LOWER = string.ascii_lowercase
    DIGIT = string.digits
    PUNCTUATION = string.punctuation

    @property
    def characters(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


# Character sets
UPPER = CharacterClass.UPPER.characters
LOWER = CharacterClass.LOWER.characters
DIGIT = CharacterClass.DIGIT.characters
PUNCTUATION = CharacterClass.PUNCTUATION.characters

# Order used when assembling the full pool
POOL_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.PUNCTUATION,
    CharacterClass.DIGIT,
)

# Order used when drawing minimum-count characters
DRAW_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGIT,
    CharacterClass.PUNCTUATION,
)

# Visually confusing pairs, each removed only when both of its classes are pooled
AMBIGUOUS_DIGIT_LOWER = "1l"
AMBIGUOUS_DIGIT_UPPER = "0O"


def classify(char: str) -> CharacterClass:
    """
    Return the canonical class a single character belongs to.

    Raises:
        ValueError: If the character is outside every canonical class
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")

    for char_class in CharacterClass:
        if char in char_class.characters:
            return char_class
    raise ValueError(f"Character {char!r} is not in any character class")
