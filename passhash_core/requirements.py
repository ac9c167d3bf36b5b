"""
Password Requirements
=====================
Minimum length and character category checks for new passwords.
"""

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .exceptions import ConfigError
from .normalizer import try_normalize


class LetterCategoryMode(str, Enum):
    """How letters count towards matched character categories."""
    # Uppercase, lowercase and other letters (e.g. CJK) are 3 categories
    THREE_CATEGORIES = "three"
    # Uppercase and lowercase are 2 categories; other letters can stand in for one of them
    TWO_CATEGORIES = "two"
    # Any letter is a single category
    ONE_CATEGORY = "one"
    # Letters do not count towards categories
    NONE = "none"


@dataclass
class RequirementsResult:
    """Outcome of a requirements check."""
    length: int
    categories: int
    failures: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures


@dataclass
class PasswordRequirements:
    """Requirements a new password must meet."""
    min_length: int = 8
    min_categories: int = 3
    letter_mode: LetterCategoryMode = LetterCategoryMode.TWO_CATEGORIES

    def __post_init__(self):
        self.letter_mode = LetterCategoryMode(self.letter_mode)
        if self.min_length < 1:
            raise ConfigError("Minimum password length must be at least 1.")
        if self.min_categories < 0:
            raise ConfigError("Minimum category count cannot be negative.")

    def count_categories(self, password: str) -> int:
        """
        Count the character categories present in a password.

        Categories are letters (per ``letter_mode``), digits, symbols and
        punctuation, and everything else (spaces, marks).
        """
        upper = lower = other_letter = digit = symbol = other = False

        for c in password:
            category = unicodedata.category(c)
            if category in ("Lu", "Lt"):
                upper = True
            elif category == "Ll":
                lower = True
            elif category[0] == "L":
                other_letter = True
            elif category[0] == "N":
                digit = True
            elif category[0] in ("P", "S"):
                symbol = True
            else:
                other = True

        mode = self.letter_mode
        if mode == LetterCategoryMode.THREE_CATEGORIES:
            letters = upper + lower + other_letter
        elif mode == LetterCategoryMode.TWO_CATEGORIES:
            letters = upper + lower
            if other_letter and letters < 2:
                letters += 1
        elif mode == LetterCategoryMode.ONE_CATEGORY:
            letters = int(upper or lower or other_letter)
        else:
            letters = 0

        return letters + digit + symbol + other

    def check(self, password: str) -> RequirementsResult:
        """
        Check a password against the requirements.

        Length is counted in code points of the normalized password when it
        can be normalized.
        """
        normalized = try_normalize(password)
        if normalized.ok:
            password = normalized.value

        result = RequirementsResult(
            length=len(password),
            categories=self.count_categories(password),
        )

        if result.length < self.min_length:
            result.failures.append(
                f"Password must be at least {self.min_length} characters long."
            )

        if result.categories < self.min_categories:
            result.failures.append(
                f"Password must contain at least {self.min_categories} character categories."
            )

        return result
