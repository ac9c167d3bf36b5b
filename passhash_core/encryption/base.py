"""
Hash Encryption Algorithm Base
==============================
Contract for ciphers that encrypt password hash bytes at rest.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Callable, Optional

# Returns ``n`` cryptographically secure random bytes; must be thread-safe
RandomSource = Callable[[int], bytes]


class HashEncryptionAlgorithm(ABC):
    """
    Encrypts and decrypts password hashes with a caller-supplied master key.

    Every call to ``encrypt`` must be randomized (fresh IV or nonce) so that
    encrypting the same hash twice never yields the same ciphertext.
    """

    def __init__(self, random_source: Optional[RandomSource] = None):
        self._random_source = random_source or secrets.token_bytes

    @abstractmethod
    def is_valid_key_size(self, size: int) -> bool:
        """Check whether a key of ``size`` bytes is valid for this algorithm."""

    @abstractmethod
    def encrypt(self, key: bytes, data: bytes) -> bytes:
        """Encrypt ``data`` and return the result."""

    @abstractmethod
    def decrypt(self, key: bytes, encrypted_data: bytes) -> bytes:
        """
        Decrypt ``encrypted_data`` and return the result.

        Raises:
            FormatError: If the data is not a valid ciphertext for this key
        """

    def _random_bytes(self, size: int) -> bytes:
        return self._random_source(size)
