"""
Argon2 Hash Algorithm
=====================
Argon2d, Argon2i and Argon2id raw hashing via argon2-cffi.

Argon2 is memory-hard: the memory size and parallelism are fixed per
algorithm instance (and encoded in its ID) while the iteration count of each
chain segment is used as the Argon2 time cost.
"""

from enum import Enum, IntEnum

from argon2.low_level import Type, hash_secret_raw

from ..exceptions import ConfigError
from .base import PasswordHashAlgorithm


class Argon2Type(str, Enum):
    """Argon2 variants."""
    ARGON2D = "Argon2d"
    ARGON2I = "Argon2i"
    ARGON2ID = "Argon2id"


class Argon2Version(IntEnum):
    """Argon2 versions."""
    V16 = 0x10  # 1.2.1 and earlier
    V19 = 0x13  # 1.3


_LOW_LEVEL_TYPES = {
    Argon2Type.ARGON2D: Type.D,
    Argon2Type.ARGON2I: Type.I,
    Argon2Type.ARGON2ID: Type.ID,
}


class Argon2HashAlgorithm(PasswordHashAlgorithm):
    """
    Argon2 password hashing.

    Args:
        type: Argon2 variant
        version: Argon2 version
        parallelism: Number of lanes used while hashing
        memory_size: Memory used while hashing, in MB
        output_size: Hash output size in bytes (16 recommended)
    """

    def __init__(
        self,
        type: Argon2Type = Argon2Type.ARGON2ID,
        version: Argon2Version = Argon2Version.V19,
        parallelism: int = 1,
        memory_size: int = 64,
        output_size: int = 16,
    ):
        type = Argon2Type(type)
        version = Argon2Version(version)

        if parallelism < 1:
            raise ConfigError("Argon2 parallelism must be at least 1.")
        if memory_size < 1:
            raise ConfigError("Argon2 memory size must be at least 1 MB.")
        if output_size < 4:
            raise ConfigError("Argon2 output size must be at least 4 bytes.")
        if memory_size * 1024 < 8 * parallelism:
            raise ConfigError("Argon2 memory size is too small for the parallelism.")

        super().__init__(
            f"{type.value}V{version.value}-{output_size * 8}-{parallelism}P-{memory_size}MB"
        )

        self.type = type
        self.version = version
        self.parallelism = parallelism
        self.memory_size = memory_size
        self.output_size = output_size

    def hash(self, password: bytes, salt: bytes, iterations: int) -> bytes:
        return hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=iterations,
            memory_cost=self.memory_size * 1024,
            parallelism=self.parallelism,
            hash_len=self.output_size,
            type=_LOW_LEVEL_TYPES[self.type],
            version=self.version.value,
        )
