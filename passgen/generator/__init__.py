"""
Policy-driven password generation.

Obtain a builder, configure it, build an immutable generator and draw
passwords from it:

    generator = builder().include_punctuation(False).require_digit(2).build()
    password = generator.generate_one(16)
"""

from .builder import PasswordGeneratorBuilder, builder
from .charsets import CharacterClass
from .password_generator import DEFAULT_COUNT, DEFAULT_LENGTH, PasswordGenerator
from .pool import ResolvedPool

__all__ = [
    'builder',
    'PasswordGeneratorBuilder',
    'PasswordGenerator',
    'ResolvedPool',
    'CharacterClass',
    'DEFAULT_LENGTH',
    'DEFAULT_COUNT',
]
