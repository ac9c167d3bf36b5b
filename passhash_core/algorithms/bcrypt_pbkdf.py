"""
bcrypt-pbkdf Hash Algorithm
===========================
Raw key derivation using the bcrypt-pbkdf construction from the bcrypt package.
"""

import bcrypt

from ..exceptions import ConfigError
from .base import PasswordHashAlgorithm

# bcrypt.kdf limit on requested key length
MAX_OUTPUT_SIZE = 512


class BcryptPbkdfHashAlgorithm(PasswordHashAlgorithm):
    """bcrypt-pbkdf with the chain segment iterations used as rounds."""

    def __init__(self, output_size: int = 32):
        if not 1 <= output_size <= MAX_OUTPUT_SIZE:
            raise ConfigError(
                f"bcrypt-pbkdf output size must be between 1 and {MAX_OUTPUT_SIZE} bytes."
            )

        super().__init__(f"BCRYPT-PBKDF{output_size * 8}")
        self.output_size = output_size

    def hash(self, password: bytes, salt: bytes, iterations: int) -> bytes:
        return bcrypt.kdf(
            password=password,
            salt=salt,
            desired_key_bytes=self.output_size,
            rounds=iterations,
            ignore_few_rounds=True,
        )
