"""
Password Hasher Exceptions
==========================
Exception classes raised by the hasher, codec and normalizer.
"""


class PasswordHasherError(Exception):
    """Base exception for all password hasher errors."""
    pass


class ConfigError(PasswordHasherError, ValueError):
    """Raised when a hasher, algorithm or encryption parameter set is misconfigured."""
    pass


class FormatError(PasswordHasherError, ValueError):
    """Raised when a stored hash string cannot be parsed or decrypted."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Hash string was in an invalid format: {reason}")


class NormalizationError(PasswordHasherError, ValueError):
    """Raised when a password cannot be prepared with the OpaqueString profile."""
    pass


class EmptyPasswordError(PasswordHasherError, ValueError):
    """Raised when an empty password is passed to the hasher."""

    def __init__(self, message: str = "Password cannot be empty"):
        super().__init__(message)
