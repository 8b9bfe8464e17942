"""
Unit tests for field validators.

Tests verify:
- Name rule (surname required, empty not flagged)
- Password criteria evaluation and independence
- Login minimum length
"""

import pytest

from src.domain import messages
from src.domain.validators import (
    PasswordCriteria,
    evaluate_password,
    login_has_min_length,
    validate_name,
)


class TestValidateName:
    """Tests for validate_name."""

    def test_empty_name_not_flagged(self) -> None:
        """No error before the user has typed anything."""
        assert validate_name("") is None

    def test_whitespace_only_not_flagged(self) -> None:
        assert validate_name("   ") is None

    def test_single_token_flagged(self) -> None:
        assert validate_name("Ana") == messages.NAME_NEEDS_SURNAME

    def test_trailing_space_does_not_count_as_surname(self) -> None:
        """Name is trimmed before looking for the separator."""
        assert validate_name("Ana ") == messages.NAME_NEEDS_SURNAME
        assert validate_name("  Ana") == messages.NAME_NEEDS_SURNAME

    @pytest.mark.parametrize("name", ["Ana Silva", "  Ana Silva  ", "Maria da Silva"])
    def test_name_with_surname_accepted(self, name: str) -> None:
        assert validate_name(name) is None


class TestEvaluatePassword:
    """Tests for evaluate_password."""

    def test_empty_password_meets_nothing(self) -> None:
        assert evaluate_password("") == PasswordCriteria(False, False, False)

    def test_all_criteria_met(self) -> None:
        criteria = evaluate_password("Senha123")
        assert criteria == PasswordCriteria(True, True, True)
        assert criteria.satisfied

    def test_length_boundary(self) -> None:
        assert not evaluate_password("A1bcdef").has_min_length
        assert evaluate_password("A1bcdefg").has_min_length

    def test_uppercase_is_latin_range_only(self) -> None:
        assert not evaluate_password("ção12345").has_upper_case
        assert not evaluate_password("ÇÃO12345").has_upper_case
        assert evaluate_password("Z").has_upper_case

    def test_digit_is_decimal_ascii(self) -> None:
        assert not evaluate_password("Senha٣abc").has_digit
        assert evaluate_password("0").has_digit

    def test_secret1_misses_length_only(self) -> None:
        criteria = evaluate_password("Secret1")
        assert criteria == PasswordCriteria(has_min_length=False, has_upper_case=True, has_digit=True)
        assert not criteria.satisfied

    @pytest.mark.parametrize("base", ["", "abc", "ABC", "123", "Senha123", "lowercase"])
    def test_adding_digit_only_affects_digit_and_length(self, base: str) -> None:
        """Adding a digit never flips has_upper_case, never unsets anything."""
        before = evaluate_password(base)
        after = evaluate_password(base + "7")
        assert after.has_upper_case == before.has_upper_case
        assert after.has_digit
        assert after.has_min_length >= before.has_min_length

    @pytest.mark.parametrize("base", ["", "abc", "123", "senha123", "abcdefgh"])
    def test_adding_uppercase_only_affects_uppercase_and_length(self, base: str) -> None:
        before = evaluate_password(base)
        after = evaluate_password(base + "Q")
        assert after.has_digit == before.has_digit
        assert after.has_upper_case
        assert after.has_min_length >= before.has_min_length

    @pytest.mark.parametrize("base", ["", "a", "A", "1", "Ab1"])
    def test_adding_lowercase_only_affects_length(self, base: str) -> None:
        before = evaluate_password(base)
        after = evaluate_password(base + "x")
        assert after.has_digit == before.has_digit
        assert after.has_upper_case == before.has_upper_case
        assert after.has_min_length >= before.has_min_length


class TestLoginMinLength:
    def test_short_logins(self) -> None:
        assert not login_has_min_length("")
        assert not login_has_min_length("ab")

    def test_whitespace_is_trimmed(self) -> None:
        assert not login_has_min_length(" ab ")

    def test_three_characters_is_enough(self) -> None:
        assert login_has_min_length("abc")

    def test_custom_minimum(self) -> None:
        assert not login_has_min_length("abcd", min_length=5)
        assert login_has_min_length("abcde", min_length=5)
