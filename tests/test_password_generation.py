"""
Unit tests for password generation functionality.
"""

import string
import threading
from unittest.mock import patch

import pytest

from passgen.exceptions import InvalidArgumentError, PoolExhaustedError
from passgen.generator import builder, CharacterClass, PasswordGenerator
from passgen.generator import password_generator


AMBIGUOUS = set("0O1l")
ALL_CHARS = set(string.ascii_uppercase + string.ascii_lowercase
                + string.digits + string.punctuation)


class TestPasswordGenerator:
    """Test generating passwords from a built generator."""

    def test_default_password(self):
        """Test default password generation."""
        generator = builder().build()
        password = generator.generate_one()

        assert isinstance(password, str)
        assert len(password) == 12
        assert set(password) <= ALL_CHARS - AMBIGUOUS

    def test_generate_returns_list(self):
        """Test that generate always returns a list."""
        generator = builder().build()

        single = generator.generate(12, 1)
        assert isinstance(single, list)
        assert len(single) == 1
        assert len(single[0]) == 12

        many = generator.generate(8, 5)
        assert len(many) == 5
        assert all(len(p) == 8 for p in many)

    def test_custom_length(self):
        """Test custom password length."""
        generator = builder().build()
        for length in [1, 4, 8, 16, 32, 64, 128, 500]:
            assert len(generator.generate_one(length)) == length

    def test_no_punctuation(self):
        """Test excluding punctuation from a 15-character password."""
        generator = builder().include_punctuation(False).build()

        for _ in range(50):
            password = generator.generate_one(15)
            assert len(password) == 15
            assert not any(c in string.punctuation for c in password)

    def test_letters_only_with_minimums(self):
        """Test 10 letter-only passwords requiring both cases."""
        generator = (
            builder()
            .include_digit(False)
            .include_punctuation(False)
            .require_upper(1)
            .require_lower(1)
            .build()
        )

        passwords = generator.generate(16, 10)

        assert len(passwords) == 10
        for password in passwords:
            assert len(password) == 16
            assert any(c in string.ascii_uppercase for c in password)
            assert any(c in string.ascii_lowercase for c in password)
            assert not any(c in string.digits for c in password)
            assert not any(c in string.punctuation for c in password)

    def test_minimum_counts_satisfied(self):
        """Test every class minimum is met in every password."""
        generator = (
            builder()
            .require_upper(2)
            .require_lower(3)
            .require_digit(4)
            .require_punctuation(5)
            .build()
        )

        for password in generator.generate(20, 50):
            assert len(password) == 20
            assert sum(c in string.ascii_uppercase for c in password) >= 2
            assert sum(c in string.ascii_lowercase for c in password) >= 3
            assert sum(c in string.digits for c in password) >= 4
            assert sum(c in string.punctuation for c in password) >= 5

    def test_minimums_exceed_length(self):
        """Test minimums take precedence over a shorter requested length."""
        generator = builder().require_upper(3).require_digit(4).build()

        for password in generator.generate(5, 20):
            assert len(password) == 7
            assert sum(c in string.ascii_uppercase for c in password) == 3
            assert sum(c in string.digits for c in password) == 4

    def test_exact_minimums_use_only_class_characters(self):
        """Test a length equal to the minimums draws no filler characters."""
        generator = builder().require_digit(6).build()

        for password in generator.generate(6, 20):
            assert len(password) == 6
            assert all(c in "23456789" for c in password)

    def test_forbidden_characters_absent(self):
        """Test forbidden characters never appear, whatever their class."""
        forbidden = "aeiouAEIOU25!?#"
        generator = builder().forbid(forbidden).require_punctuation(3).build()

        for password in generator.generate(40, 50):
            assert not any(c in forbidden for c in password)

    def test_characters_stay_in_pool(self):
        """Test generated characters all come from the resolved pool."""
        generator = builder().include_upper(False).forbid("xyz").require_digit(2).build()
        pool = set(generator.pool.full)

        for password in generator.generate(30, 50):
            assert set(password) <= pool

    def test_password_uniqueness(self):
        """Test that repeated calls produce fresh passwords."""
        generator = builder().build()
        passwords = set(generator.generate(16, 100))

        assert len(passwords) == 100
        assert generator.generate_one(16) not in passwords

    def test_mandatory_characters_are_shuffled(self):
        """Test required characters are not pinned to the first positions."""
        generator = (
            builder()
            .include_upper(False)
            .include_punctuation(False)
            .require_digit(1)
            .build()
        )

        last_is_digit = False
        for _ in range(200):
            password = generator.generate_one(2)
            if password[-1] in string.digits:
                last_is_digit = True
                break

        assert last_is_digit

    def test_draw_order_without_shuffle(self):
        """Test minimum draws run upper, lower, digit, punctuation, then filler."""
        generator = (
            builder()
            .require_upper(1)
            .require_lower(1)
            .require_digit(1)
            .require_punctuation(1)
            .build()
        )

        with patch.object(password_generator._sysrand, "shuffle") as mock_shuffle, \
                patch("secrets.choice", side_effect=lambda seq: seq[0]):
            password = generator.generate_one(6)

        assert password == "Aa2!AA"
        mock_shuffle.assert_called_once()

    def test_zero_length(self):
        """Test zero length produces an empty password."""
        generator = builder().build()

        assert generator.generate_one(0) == ""
        assert generator.generate(0, 3) == ["", "", ""]

    def test_zero_length_with_minimums(self):
        """Test zero length still honours minimums."""
        generator = builder().require_lower(2).build()

        password = generator.generate_one(0)
        assert len(password) == 2
        assert all(c in string.ascii_lowercase for c in password)

    def test_concurrent_generation(self):
        """Test a shared generator used from several threads."""
        generator = builder().require_digit(2).build()
        results = []
        lock = threading.Lock()

        def worker():
            passwords = generator.generate(16, 20)
            with lock:
                results.extend(passwords)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 80
        assert all(len(p) == 16 for p in results)
        assert all(sum(c in string.digits for c in p) >= 2 for p in results)

    def test_describe(self):
        """Test the pool description."""
        generator = (
            builder()
            .include_punctuation(False)
            .require_digit(2)
            .build()
        )

        info = generator.describe()
        assert "upper (25)" in info
        assert "lower (25)" in info
        assert "digit (8) min 2" in info
        assert "punctuation" not in info

        empty = (
            builder()
            .include_upper(False)
            .include_lower(False)
            .include_digit(False)
            .include_punctuation(False)
            .build()
        )
        assert empty.describe() == "empty pool"


class TestGenerationErrors:
    """Test generation-time error handling."""

    def test_empty_pool(self):
        """Test generating from an empty pool."""
        generator = (
            builder()
            .include_upper(False)
            .include_lower(False)
            .include_digit(False)
            .include_punctuation(False)
            .build()
        )

        with pytest.raises(PoolExhaustedError):
            generator.generate(5, 1)

    def test_empty_pool_zero_length(self):
        """Test an empty pool is fine when nothing needs to be drawn."""
        generator = (
            builder()
            .include_upper(False)
            .include_lower(False)
            .include_digit(False)
            .include_punctuation(False)
            .build()
        )

        assert generator.generate_one(0) == ""

    def test_minimum_for_excluded_class(self):
        """Test requiring a class that is excluded from the pool."""
        generator = builder().require_upper(3).include_upper(False).build()

        with pytest.raises(PoolExhaustedError, match="upper"):
            generator.generate(5, 1)

    def test_minimum_for_fully_forbidden_class(self):
        """Test requiring a class whose characters are all forbidden."""
        generator = builder().require_digit(1).forbid(string.digits).build()

        with pytest.raises(PoolExhaustedError, match="digit"):
            generator.generate_one()

    def test_invalid_length(self):
        """Test negative and non-integer lengths."""
        generator = builder().build()

        with pytest.raises(InvalidArgumentError, match="negative"):
            generator.generate(-1)
        with pytest.raises(InvalidArgumentError, match="integer"):
            generator.generate(12.0)
        with pytest.raises(InvalidArgumentError):
            generator.generate_one(True)

    def test_invalid_count(self):
        """Test zero, negative and non-integer counts."""
        generator = builder().build()

        for count in [0, -3]:
            with pytest.raises(InvalidArgumentError, match="at least 1"):
                generator.generate(12, count)
        with pytest.raises(InvalidArgumentError, match="integer"):
            generator.generate(12, "2")

    def test_invalid_argument_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError."""
        generator = builder().build()

        with pytest.raises(ValueError):
            generator.generate(12, 0)


class TestGeneratorImmutability:
    """Test the one-way builder to generator lifecycle."""

    def test_direct_construction_rejected(self):
        """Test PasswordGenerator cannot be created without the builder."""
        pool = builder().build().pool

        with pytest.raises(TypeError):
            PasswordGenerator(object(), pool, {})

    def test_attributes_read_only(self):
        """Test generator attributes cannot be reassigned."""
        generator = builder().build()

        with pytest.raises(AttributeError):
            generator._pool = None
        with pytest.raises(AttributeError):
            generator.extra = 1
        with pytest.raises(AttributeError):
            del generator._minimums

    def test_builder_changes_after_build(self):
        """Test later builder changes do not reach an existing generator."""
        generator_builder = builder().require_digit(2)
        generator = generator_builder.build()
        full_pool = generator.pool.full

        generator_builder.include_digit(False).require_digit(0).forbid("abc")

        assert generator.pool.full == full_pool
        assert generator.minimums[CharacterClass.DIGIT] == 2
        for password in generator.generate(10, 20):
            assert sum(c in string.digits for c in password) >= 2

    def test_minimums_copy(self):
        """Test the minimums property returns a copy."""
        generator = builder().require_upper(2).build()

        minimums = generator.minimums
        minimums[CharacterClass.UPPER] = 10

        assert generator.minimums[CharacterClass.UPPER] == 2
        assert generator.required_length == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
