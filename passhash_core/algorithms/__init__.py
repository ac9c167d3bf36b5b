"""
Password Hash Algorithms
========================
Pluggable iterative hash algorithms identified by a stable ID.
"""

from .base import PasswordHashAlgorithm, RESERVED_ID_CHARACTERS, validate_algorithm_id
from .pbkdf2 import (
    Pbkdf2HashAlgorithm,
    PBKDF2_SHA1,
    PBKDF2_SHA256,
    PBKDF2_SHA384,
    PBKDF2_SHA512,
)
from .argon2_hash import Argon2HashAlgorithm, Argon2Type, Argon2Version
from .bcrypt_pbkdf import BcryptPbkdfHashAlgorithm

__all__ = [
    # Base
    "PasswordHashAlgorithm",
    "RESERVED_ID_CHARACTERS",
    "validate_algorithm_id",
    # PBKDF2
    "Pbkdf2HashAlgorithm",
    "PBKDF2_SHA1",
    "PBKDF2_SHA256",
    "PBKDF2_SHA384",
    "PBKDF2_SHA512",
    # Argon2
    "Argon2HashAlgorithm",
    "Argon2Type",
    "Argon2Version",
    # bcrypt
    "BcryptPbkdfHashAlgorithm",
]
