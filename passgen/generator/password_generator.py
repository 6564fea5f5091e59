"""
Secure password generation from a resolved character pool.
"""

import logging
import secrets
from typing import Dict, List

from ..exceptions import InvalidArgumentError, PoolExhaustedError
from ..utils.validation import (
    get_validation_error_message,
    validate_count,
    validate_length,
)
from .charsets import DRAW_ORDER, CharacterClass
from .pool import ResolvedPool


logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 12
DEFAULT_COUNT = 1

# Only the builder holds this, so generators come from build() alone
_GENERATOR_TOKEN = object()

_sysrand = secrets.SystemRandom()


class PasswordGenerator:
    """
    Immutable password generator.

    Holds the character pool and per-class minimum counts captured when the
    builder ran. Safe to share between threads; every call draws fresh
    randomness from the operating system CSPRNG.
    """

    __slots__ = ("_pool", "_minimums")

    def __init__(self, token: object, pool: ResolvedPool,
                 minimums: Dict[CharacterClass, int]):
        if token is not _GENERATOR_TOKEN:
            raise TypeError(
                "PasswordGenerator cannot be created directly; "
                "use passgen.generator.builder().build()"
            )
        object.__setattr__(self, "_pool", pool)
        object.__setattr__(self, "_minimums", {
            char_class: minimums.get(char_class, 0) for char_class in DRAW_ORDER
        })

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"<PasswordGenerator pool={len(self._pool.full)} chars ({self.describe()})>"

    @property
    def pool(self) -> ResolvedPool:
        """The resolved character pool."""
        return self._pool

    @property
    def minimums(self) -> Dict[CharacterClass, int]:
        """Minimum count per character class (a copy)."""
        return dict(self._minimums)

    @property
    def required_length(self) -> int:
        """Sum of all per-class minimum counts."""
        return sum(max(minimum, 0) for minimum in self._minimums.values())

    def generate(self, length: int = DEFAULT_LENGTH, count: int = DEFAULT_COUNT) -> List[str]:
        """
        Generate one or more passwords.

        Each password contains at least the configured minimum of every
        character class. If the minimums add up to more than ``length``, the
        password is that much longer rather than truncated.

        Args:
            length: Requested password length (0 or more)
            count: Number of passwords to generate (1 or more)

        Returns:
            List of ``count`` independently generated passwords

        Raises:
            InvalidArgumentError: If length is negative or count is below 1
            PoolExhaustedError: If a required draw has no characters available
        """
        if not validate_length(length):
            raise InvalidArgumentError(get_validation_error_message("length", length))
        if not validate_count(count):
            raise InvalidArgumentError(get_validation_error_message("count", count))

        logger.debug(f"Generating {count} password(s) of length {length}")
        return [self._generate_one(length) for _ in range(count)]

    def generate_one(self, length: int = DEFAULT_LENGTH) -> str:
        """
        Generate a single password.

        Args:
            length: Requested password length (0 or more)

        Returns:
            Generated password string
        """
        return self.generate(length, 1)[0]

    def describe(self) -> str:
        """
        Get human-readable description of the pool and minimums.

        Returns:
            Description of available character classes and requirements
        """
        parts = []
        for char_class in DRAW_ORDER:
            available = len(self._pool.for_class(char_class))
            if not available:
                continue
            part = f"{char_class.label} ({available})"
            minimum = self._minimums[char_class]
            if minimum > 0:
                part += f" min {minimum}"
            parts.append(part)

        if not parts:
            return "empty pool"
        return ", ".join(parts)

    def _generate_one(self, length: int) -> str:
        chars: List[str] = []

        for char_class in DRAW_ORDER:
            minimum = self._minimums[char_class]
            if minimum <= 0:
                continue
            chars.extend(_draw(self._pool.for_class(char_class), minimum, char_class.label))

        filler = max(length - len(chars), 0)
        if filler:
            chars.extend(_draw(self._pool.full, filler, "pool"))

        # Spread mandatory characters across the password
        _sysrand.shuffle(chars)
        return "".join(chars)


def _draw(source: str, count: int, name: str) -> List[str]:
    """Draw ``count`` characters uniformly, with replacement, from source."""
    if not source:
        raise PoolExhaustedError(
            f"Cannot draw {count} character(s): no {name} characters available"
        )
    return [secrets.choice(source) for _ in range(count)]
