"""
Password Hash Algorithm Base
============================
Contract shared by every iterative password hash algorithm.
"""

from abc import ABC, abstractmethod

from ..exceptions import ConfigError

# Characters that cannot appear in an algorithm ID
RESERVED_ID_CHARACTERS = " ~!@#$%^"


def validate_algorithm_id(algorithm_id: str) -> str:
    """
    Ensure an algorithm ID can be embedded in a hash string.

    Raises:
        ConfigError: If the ID is empty or contains a reserved character
    """
    if not algorithm_id:
        raise ConfigError("Algorithm ID cannot be empty.")

    if any(c in algorithm_id for c in RESERVED_ID_CHARACTERS):
        raise ConfigError(f"Algorithm ID '{algorithm_id}' contains invalid characters.")

    # ':' separates the parts of a chain segment
    if ":" in algorithm_id:
        raise ConfigError(f"Algorithm ID '{algorithm_id}' contains invalid characters.")

    return algorithm_id


class PasswordHashAlgorithm(ABC):
    """
    An iterative password hash algorithm such as PBKDF2, Argon2 or bcrypt.

    The ``id`` is written into every hash string the algorithm produces, so
    it must stay stable for as long as such hashes are stored.
    """

    #: Algorithms that may only be used to read existing hashes
    legacy_only: bool = False

    def __init__(self, algorithm_id: str):
        self._id = validate_algorithm_id(algorithm_id)

    @property
    def id(self) -> str:
        return self._id

    @abstractmethod
    def hash(self, password: bytes, salt: bytes, iterations: int) -> bytes:
        """
        Hash the password bytes with the given salt and iteration count.

        Must be deterministic and must not modify its inputs.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"
