"""
passhash-core
=============
Upgradable password hashing with hash chaining, at-rest hash encryption and
RFC 8265 password normalization.
"""

__version__ = "0.1.0"

# Errors
from passhash_core.exceptions import (
    PasswordHasherError,
    ConfigError,
    FormatError,
    NormalizationError,
    EmptyPasswordError,
)

# Hasher
from passhash_core.hasher import PasswordHasher, HasherOptions

# Hash records
from passhash_core.record import HashRecord, ChainSegment, parse_hash, format_hash

# Algorithms
from passhash_core.algorithms import (
    PasswordHashAlgorithm,
    Pbkdf2HashAlgorithm,
    Argon2HashAlgorithm,
    Argon2Type,
    Argon2Version,
    BcryptPbkdfHashAlgorithm,
    PBKDF2_SHA1,
    PBKDF2_SHA256,
    PBKDF2_SHA384,
    PBKDF2_SHA512,
)

# Encryption
from passhash_core.encryption import (
    HashEncryptionAlgorithm,
    HashEncryptionParameters,
    Aes128CbcEncryption,
    AesGcmEncryption,
    AES128,
    AES_GCM,
)

# Normalization
from passhash_core.normalizer import (
    normalize,
    try_normalize,
    can_normalize,
    NormalizationResult,
)

# Comparison
from passhash_core.comparison import constant_time_equals

# Requirements
from passhash_core.requirements import (
    PasswordRequirements,
    RequirementsResult,
    LetterCategoryMode,
)

# Configuration and logging
from passhash_core.config import load_settings
from passhash_core.log import setup_logging

__all__ = [
    # Errors
    "PasswordHasherError",
    "ConfigError",
    "FormatError",
    "NormalizationError",
    "EmptyPasswordError",
    # Hasher
    "PasswordHasher",
    "HasherOptions",
    # Hash records
    "HashRecord",
    "ChainSegment",
    "parse_hash",
    "format_hash",
    # Algorithms
    "PasswordHashAlgorithm",
    "Pbkdf2HashAlgorithm",
    "Argon2HashAlgorithm",
    "Argon2Type",
    "Argon2Version",
    "BcryptPbkdfHashAlgorithm",
    "PBKDF2_SHA1",
    "PBKDF2_SHA256",
    "PBKDF2_SHA384",
    "PBKDF2_SHA512",
    # Encryption
    "HashEncryptionAlgorithm",
    "HashEncryptionParameters",
    "Aes128CbcEncryption",
    "AesGcmEncryption",
    "AES128",
    "AES_GCM",
    # Normalization
    "normalize",
    "try_normalize",
    "can_normalize",
    "NormalizationResult",
    # Comparison
    "constant_time_equals",
    # Requirements
    "PasswordRequirements",
    "RequirementsResult",
    "LetterCategoryMode",
    # Configuration and logging
    "load_settings",
    "setup_logging",
]
