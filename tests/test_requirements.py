"""
Unit Tests for Password Requirements
====================================
"""

import pytest

from passhash_core import ConfigError, LetterCategoryMode, PasswordRequirements


class TestCategories:
    """Tests for category counting per letter mode."""

    @pytest.mark.parametrize(
        "mode,password,expected",
        [
            (LetterCategoryMode.THREE_CATEGORIES, "Ab漢", 3),
            (LetterCategoryMode.TWO_CATEGORIES, "Ab漢", 2),
            (LetterCategoryMode.TWO_CATEGORIES, "ab漢", 2),
            (LetterCategoryMode.TWO_CATEGORIES, "漢字", 1),
            (LetterCategoryMode.ONE_CATEGORY, "Ab漢", 1),
            (LetterCategoryMode.NONE, "Ab漢", 0),
        ],
    )
    def test_letter_modes(self, mode, password, expected):
        """Should count letters according to the mode."""
        requirements = PasswordRequirements(letter_mode=mode)

        assert requirements.count_categories(password) == expected

    def test_other_categories(self):
        """Digits, symbols and spaces should each count once."""
        requirements = PasswordRequirements(letter_mode=LetterCategoryMode.NONE)

        assert requirements.count_categories("12") == 1
        assert requirements.count_categories("1!") == 2
        assert requirements.count_categories("1! ") == 3
        assert requirements.count_categories("1!+ ") == 3

    def test_mode_from_string(self):
        """Should accept the mode's string value."""
        requirements = PasswordRequirements(letter_mode="three")

        assert requirements.letter_mode is LetterCategoryMode.THREE_CATEGORIES


class TestCheck:
    """Tests for PasswordRequirements.check."""

    def test_passes(self):
        """Should pass a long password with enough categories."""
        result = PasswordRequirements().check("Abcdefg1")

        assert result.passed is True
        assert result.length == 8
        assert result.categories == 3
        assert result.failures == []

    def test_fails_both(self):
        """Should report every failed requirement."""
        result = PasswordRequirements().check("abc")

        assert result.passed is False
        assert len(result.failures) == 2

    def test_length_counted_after_normalization(self):
        """Should count composed characters once."""
        requirements = PasswordRequirements(min_length=4, min_categories=0)

        result = requirements.check("cafe\u0301")

        assert result.length == 4
        assert result.passed is True

    @pytest.mark.parametrize("kwargs", [{"min_length": 0}, {"min_categories": -1}])
    def test_invalid(self, kwargs):
        """Should reject impossible requirements."""
        with pytest.raises(ConfigError):
            PasswordRequirements(**kwargs)
