#!/usr/bin/env python3
"""
Demo script showing the builder options and generated passwords.
"""

from passgen.exceptions import PoolExhaustedError
from passgen.generator import builder


def demo_defaults():
    """Demo a generator built with the default options."""
    print("🔐 DEFAULT OPTIONS")
    print("=" * 50)

    generator = builder().build()
    print(f"   Pool: {generator.describe()}")
    print(f"   Password: {generator.generate_one()}")


def demo_policies():
    """Demo class exclusion and minimum-count policies."""
    print("\n\n🧩 POLICIES")
    print("=" * 50)

    print("1. Exclude all punctuation from 15-character password:")
    generator = builder().include_punctuation(False).build()
    print(f"   {generator.generate_one(15)}")

    print("\n2. Exclude punctuation and digits; require at least 1 upper-case and")
    print("   1 lower-case character; generate 10 passwords, 16 characters each:")
    generator = (
        builder()
        .include_digit(False)
        .include_punctuation(False)
        .require_upper(1)
        .require_lower(1)
        .build()
    )
    for password in generator.generate(16, 10):
        print(f"   {password}")

    print("\n3. Require 2 digits and 2 symbols, forbid quotes and backslash:")
    generator = (
        builder()
        .require_digit(2)
        .require_punctuation(2)
        .forbid("\"'`\\")
        .build()
    )
    print(f"   {generator.generate_one(20)}")


def demo_errors():
    """Demo generation-time failures."""
    print("\n\n⚠️  ERRORS")
    print("=" * 50)

    generator = (
        builder()
        .include_upper(False)
        .require_upper(3)
        .build()
    )
    try:
        generator.generate_one(5)
    except PoolExhaustedError as e:
        print(f"   Required upper-case with none available: {e}")


if __name__ == "__main__":
    demo_defaults()
    demo_policies()
    demo_errors()

    print("\n" + "=" * 60)
    print("Run 'python -m passgen --help' for the command-line options.")
