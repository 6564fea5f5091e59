"""
Fluent configuration builder for password generators.
"""

import logging
from typing import Dict

from .charsets import CharacterClass
from .password_generator import _GENERATOR_TOKEN, PasswordGenerator
from .pool import resolve_pool


logger = logging.getLogger(__name__)

_BUILDER_TOKEN = object()


class PasswordGeneratorBuilder:
    """
    Accumulates generator options and builds an immutable PasswordGenerator.

    Every option method returns the builder itself so calls can be chained.
    Nothing is validated or resolved until build() runs, and changes made
    after build() never reach generators that were already built.
    """

    def __init__(self, token: object):
        if token is not _BUILDER_TOKEN:
            raise TypeError(
                "PasswordGeneratorBuilder cannot be created directly; "
                "use passgen.generator.builder()"
            )
        self.included: Dict[CharacterClass, bool] = {c: True for c in CharacterClass}
        self.minimums: Dict[CharacterClass, int] = {c: 0 for c in CharacterClass}
        self.ambiguous_excluded = True
        self.forbidden = ""

    def include_upper(self, include: bool = True) -> "PasswordGeneratorBuilder":
        """Include (True) or exclude (False) upper-case letters."""
        self.included[CharacterClass.UPPER] = include
        return self

    def include_lower(self, include: bool = True) -> "PasswordGeneratorBuilder":
        """Include (True) or exclude (False) lower-case letters."""
        self.included[CharacterClass.LOWER] = include
        return self

    def include_digit(self, include: bool = True) -> "PasswordGeneratorBuilder":
        """Include (True) or exclude (False) digits."""
        self.included[CharacterClass.DIGIT] = include
        return self

    def include_punctuation(self, include: bool = True) -> "PasswordGeneratorBuilder":
        """Include (True) or exclude (False) punctuation and symbols."""
        self.included[CharacterClass.PUNCTUATION] = include
        return self

    def exclude_ambiguous(self, exclude: bool = True) -> "PasswordGeneratorBuilder":
        """
        Exclude (True) or allow (False) the ambiguous pairs "0"/"O" and "1"/"l".

        A pair is only dropped when digits and the letter class holding the
        other glyph are both in the pool.
        """
        self.ambiguous_excluded = exclude
        return self

    def require_upper(self, minimum: int = 1) -> "PasswordGeneratorBuilder":
        """
        Set the minimum number of upper-case letters in every password.

        The default minimum is 0; calling without an argument raises it to 1.
        """
        self.minimums[CharacterClass.UPPER] = minimum
        return self

    def require_lower(self, minimum: int = 1) -> "PasswordGeneratorBuilder":
        """Set the minimum number of lower-case letters in every password."""
        self.minimums[CharacterClass.LOWER] = minimum
        return self

    def require_digit(self, minimum: int = 1) -> "PasswordGeneratorBuilder":
        """Set the minimum number of digits in every password."""
        self.minimums[CharacterClass.DIGIT] = minimum
        return self

    def require_punctuation(self, minimum: int = 1) -> "PasswordGeneratorBuilder":
        """Set the minimum number of punctuation characters in every password."""
        self.minimums[CharacterClass.PUNCTUATION] = minimum
        return self

    def forbid(self, characters: str) -> "PasswordGeneratorBuilder":
        """
        Remove characters from the pool, whatever their class.

        Replaces any previously forbidden characters. Characters that are not
        in the pool are ignored.

        Args:
            characters: Characters to remove
        """
        self.forbidden = characters
        return self

    def build(self) -> PasswordGenerator:
        """
        Resolve the character pool and create an immutable generator.

        Always succeeds; an empty pool or an unsatisfiable minimum only
        fails when passwords are generated.

        Returns:
            PasswordGenerator holding a snapshot of the current options
        """
        pool = resolve_pool(
            dict(self.included),
            exclude_ambiguous=self.ambiguous_excluded,
            forbidden=self.forbidden,
        )
        generator = PasswordGenerator(_GENERATOR_TOKEN, pool, dict(self.minimums))
        logger.debug(f"Built generator: {generator.describe()}")
        return generator


def builder() -> PasswordGeneratorBuilder:
    """
    Get a fresh builder with the default options.

    Defaults: all four character classes included, ambiguous characters
    excluded, no minimums and nothing forbidden.

    Returns:
        New PasswordGeneratorBuilder
    """
    return PasswordGeneratorBuilder(_BUILDER_TOKEN)
