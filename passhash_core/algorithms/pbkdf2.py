"""
PBKDF2 Hash Algorithms
======================
PBKDF2-HMAC with SHA-1/SHA-2 digests using ``hashlib``.
"""

import hashlib

from .base import PasswordHashAlgorithm


class Pbkdf2HashAlgorithm(PasswordHashAlgorithm):
    """PBKDF2-HMAC producing one digest-sized block of output."""

    def __init__(self, algorithm_id: str, digest_name: str, hash_size: int, legacy_only: bool = False):
        super().__init__(algorithm_id)
        self.digest_name = digest_name
        self.hash_size = hash_size
        self.legacy_only = legacy_only

    def hash(self, password: bytes, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac(
            self.digest_name,
            password,
            salt,
            iterations,
            dklen=self.hash_size,
        )


# SHA1 is not considered safe and is only readable for upgrading legacy hashes
PBKDF2_SHA1 = Pbkdf2HashAlgorithm("SHA1", "sha1", 20, legacy_only=True)
PBKDF2_SHA256 = Pbkdf2HashAlgorithm("SHA256", "sha256", 32)
PBKDF2_SHA384 = Pbkdf2HashAlgorithm("SHA384", "sha384", 48)
PBKDF2_SHA512 = Pbkdf2HashAlgorithm("SHA512", "sha512", 64)
