"""
Password Normalization
======================
RFC 8265 OpaqueString preparation and enforcement.

Steps applied (RFC 8265 section 4.2.2):
1. Width mapping: fullwidth/halfwidth characters are NOT mapped.
2. Additional mapping: every non-ASCII space (category Zs) becomes U+0020.
3. Case mapping: NOT applied, case is preserved.
4. Normalization: Unicode Normalization Form C.
5. Directionality: no bidi rule for passwords.

The result must then consist only of code points allowed by the RFC 8264
FreeformClass. Characters that need a contextual rule (CONTEXTJ/CONTEXTO,
e.g. ZERO WIDTH JOINER or ARABIC-INDIC digits) are always rejected rather
than checked against the RFC 5892 Appendix A rules.
"""

import unicodedata
from dataclasses import dataclass
from typing import Optional

from .exceptions import NormalizationError
from .unicode import (
    default_ignorable_table,
    exceptions_allow_table,
    exceptions_disallow_table,
    old_hangul_jamo_table,
)

# Control, unassigned (includes noncharacters), private use, surrogate
_DISALLOWED_CATEGORIES = frozenset({"Cc", "Cn", "Co", "Cs"})


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of ``try_normalize``: either a value or a failure reason."""
    ok: bool
    value: Optional[str] = None
    reason: Optional[str] = None


def _map_spaces(password: str) -> str:
    return "".join(
        " " if c != " " and unicodedata.category(c) == "Zs" else c
        for c in password
    )


def is_freeform_class_compliant(s: str) -> bool:
    """Check that every code point in ``s`` is allowed by the FreeformClass."""
    allow = exceptions_allow_table()
    disallow = exceptions_disallow_table()
    old_hangul_jamo = old_hangul_jamo_table()
    default_ignorable = default_ignorable_table()

    for c in s:
        cp = ord(c)

        if cp in allow:
            continue

        if cp in disallow or cp in old_hangul_jamo:
            return False

        # JoinControl characters are default ignorable so they land here too
        if cp in default_ignorable or unicodedata.category(c) in _DISALLOWED_CATEGORIES:
            return False

    return True


def try_normalize(password: str) -> NormalizationResult:
    """
    Normalize a password without raising for content problems.

    Returns:
        NormalizationResult with ``ok`` set and ``value`` holding the
        normalized password, or ``ok`` cleared and ``reason`` set
    """
    password = _map_spaces(password)

    try:
        password.encode("utf-8")
    except UnicodeEncodeError:
        return NormalizationResult(ok=False, reason="Password is not a valid unicode string.")

    password = unicodedata.normalize("NFC", password)

    if not is_freeform_class_compliant(password):
        return NormalizationResult(ok=False, reason="Password contains disallowed characters.")

    return NormalizationResult(ok=True, value=password)


def normalize(password: str) -> str:
    """
    Normalize a password.

    Args:
        password: Password to normalize

    Returns:
        The normalized password

    Raises:
        NormalizationError: The password is not valid unicode or contains
            characters disallowed in the FreeformClass
    """
    result = try_normalize(password)
    if not result.ok:
        raise NormalizationError(result.reason)
    return result.value


def can_normalize(password: str) -> bool:
    """Check whether a password can be normalized."""
    return try_normalize(password).ok
