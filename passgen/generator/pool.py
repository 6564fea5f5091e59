"""
Character pool resolution.

Turns builder configuration into the immutable set of characters a
generator draws from.
"""

import logging
from typing import Dict, NamedTuple

from .charsets import (
    AMBIGUOUS_DIGIT_LOWER,
    AMBIGUOUS_DIGIT_UPPER,
    POOL_ORDER,
    CharacterClass,
)


logger = logging.getLogger(__name__)


class ResolvedPool(NamedTuple):
    """Full pool plus one sub-pool per character class."""
    full: str
    upper: str
    lower: str
    digit: str
    punctuation: str

    def for_class(self, char_class: CharacterClass) -> str:
        """Return the sub-pool for a character class."""
        return getattr(self, char_class.label)

    @classmethod
    def from_full(cls, full: str) -> "ResolvedPool":
        """Derive sub-pools by intersecting the full pool with each class."""
        members = set(full)
        subpools = {
            char_class.label: "".join(c for c in char_class.characters if c in members)
            for char_class in CharacterClass
        }
        return cls(full=full, **subpools)


def _remove(pool: str, characters: str) -> str:
    """Remove every occurrence of each listed character from the pool."""
    return pool.translate({ord(c): None for c in characters})


def resolve_pool(included: Dict[CharacterClass, bool],
                 exclude_ambiguous: bool = True,
                 forbidden: str = "") -> ResolvedPool:
    """
    Assemble the character pool for a generator.

    Classes are concatenated as upper, lower, punctuation, digit. Ambiguous
    pairs are removed only when digits are pooled together with the letter
    class sharing the glyph. Forbidden characters are removed last, from
    any class.

    Args:
        included: Inclusion flag per character class (missing means excluded)
        exclude_ambiguous: Drop the "1"/"l" and "0"/"O" pairs
        forbidden: Characters to remove from the pool

    Returns:
        ResolvedPool with the full pool and per-class sub-pools
    """
    pool = "".join(
        char_class.characters for char_class in POOL_ORDER
        if included.get(char_class, False)
    )

    if included.get(CharacterClass.DIGIT, False) and exclude_ambiguous:
        if included.get(CharacterClass.LOWER, False):
            pool = _remove(pool, AMBIGUOUS_DIGIT_LOWER)
        if included.get(CharacterClass.UPPER, False):
            pool = _remove(pool, AMBIGUOUS_DIGIT_UPPER)

    if forbidden:
        pool = _remove(pool, forbidden)

    logger.debug(f"Resolved pool of {len(pool)} characters")
    return ResolvedPool.from_full(pool)
