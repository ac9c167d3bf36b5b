"""
Constant-Time Comparison
========================
Byte comparison whose timing does not depend on where the inputs differ.
"""

import hmac


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings in constant time.

    Uses constant-time comparison to prevent timing attacks. Inputs of
    different lengths compare unequal without revealing where they differ.

    Args:
        a: First byte string
        b: Second byte string

    Returns:
        True if both byte strings are identical
    """
    return hmac.compare_digest(a, b)
