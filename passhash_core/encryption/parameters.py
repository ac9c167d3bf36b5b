"""
Hash Encryption Parameters
==========================
A master key bound to a cipher and a caller-assigned integer ID.
"""

from ..exceptions import ConfigError
from .base import HashEncryptionAlgorithm


class HashEncryptionParameters:
    """
    Parameters used to encrypt password hashes.

    The ID is written into every hash string encrypted with these
    parameters. After a key rotation the old parameters stay registered as
    legacy parameters so existing hashes remain readable.

    Args:
        id: Unique ID identifying this set of parameters
        algorithm: Cipher used to encrypt the hash bytes
        key: Master key, copied on construction
    """

    __slots__ = ("_id", "_algorithm", "_key")

    def __init__(self, id: int, algorithm: HashEncryptionAlgorithm, key: bytes):
        if isinstance(id, bool) or not isinstance(id, int):
            raise ConfigError("Encryption parameter ID must be an integer.")

        if not algorithm.is_valid_key_size(len(key)):
            raise ConfigError("The key provided is not a valid length for the given algorithm.")

        self._id = id
        self._algorithm = algorithm
        self._key = bytes(key)

    @property
    def id(self) -> int:
        return self._id

    @property
    def algorithm(self) -> HashEncryptionAlgorithm:
        return self._algorithm

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt hash bytes with this master key."""
        return self._algorithm.encrypt(self._key, data)

    def decrypt(self, encrypted_data: bytes) -> bytes:
        """Decrypt hash bytes with this master key."""
        return self._algorithm.decrypt(self._key, encrypted_data)

    def __repr__(self) -> str:
        # Never include the key
        return f"HashEncryptionParameters(id={self._id}, algorithm={type(self._algorithm).__name__})"
