"""
Password Hasher
===============
Upgradable password hashing with hash chaining and at-rest encryption.

Stored hashes can be moved to a stronger algorithm, a higher iteration count
or a new master key without knowing the password:

- ``update`` chains one more main-algorithm segment on top of the existing
  hash (or just re-encrypts it) so the stored value can be replaced right
  away, e.g. in a migration job
- ``requires_rehash`` should be checked on successful login so a fresh,
  unchained hash can be produced with ``rehash`` while the password is known

Usage:
    hasher = PasswordHasher(PBKDF2_SHA256, 600_000)

    stored = hasher.hash(password)
    if hasher.verify(stored, password):
        ...
"""

import secrets
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import structlog

from .algorithms import PasswordHashAlgorithm
from .comparison import constant_time_equals
from .config import load_settings, validate_salt_size
from .encryption import HashEncryptionParameters, RandomSource
from .exceptions import ConfigError, EmptyPasswordError
from .normalizer import normalize as normalize_password, try_normalize
from .record import MAX_STORED_INT, ChainSegment, HashRecord, format_hash, parse_hash
from .registry import AlgorithmRegistry, EncryptionRegistry

logger = structlog.get_logger(__name__)


@dataclass
class HasherOptions:
    """Additional options for PasswordHasher."""
    salt_size: Optional[int] = None
    normalize: Optional[bool] = None
    encryption_parameters: Optional[HashEncryptionParameters] = None
    legacy_hash_algorithms: Iterable[PasswordHashAlgorithm] = ()
    legacy_encryption_parameters: Iterable[HashEncryptionParameters] = ()
    random_source: RandomSource = secrets.token_bytes

    def __post_init__(self):
        # Unset values come from the environment, read once per options object
        if self.salt_size is None or self.normalize is None:
            settings = load_settings()
            if self.salt_size is None:
                self.salt_size = settings.salt_size
            if self.normalize is None:
                self.normalize = settings.normalize


class PasswordHasher:
    """
    Upgradable password hasher.

    All settings are fixed at construction; methods are safe to call from
    multiple threads.

    Args:
        algorithm: Main password hash algorithm
        iterations: Number of iterations to perform with the main algorithm
        options: Salt size, normalization, encryption and legacy settings
    """

    def __init__(
        self,
        algorithm: PasswordHashAlgorithm,
        iterations: int,
        options: Optional[HasherOptions] = None,
    ):
        options = options or HasherOptions()

        if algorithm.legacy_only:
            raise ConfigError(
                f"{algorithm.id} is not considered safe and is only supported as a legacy algorithm."
            )

        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
            raise ConfigError("Iterations must be a positive integer.")

        if iterations > MAX_STORED_INT:
            raise ConfigError(f"Iterations cannot exceed {MAX_STORED_INT}.")

        self._algorithm = algorithm
        self._iterations = iterations
        self._salt_size = validate_salt_size(options.salt_size)
        self._normalize = bool(options.normalize)
        self._encryption_parameters = options.encryption_parameters
        self._random_source = options.random_source

        # Copies, so later changes to the caller's collections have no effect
        self._algorithms = AlgorithmRegistry(algorithm, tuple(options.legacy_hash_algorithms))
        self._encryption = EncryptionRegistry(
            options.encryption_parameters,
            tuple(options.legacy_encryption_parameters),
        )

        logger.info(
            "password_hasher_created",
            algorithm=algorithm.id,
            iterations=iterations,
            encryption_id=self.encryption_id,
            normalize=self._normalize,
            readable_algorithms=len(self._algorithms),
            readable_encryption_ids=len(self._encryption),
        )

    @property
    def algorithm(self) -> PasswordHashAlgorithm:
        return self._algorithm

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def encryption_parameters(self) -> Optional[HashEncryptionParameters]:
        return self._encryption_parameters

    @property
    def encryption_id(self) -> Optional[int]:
        return self._encryption_parameters.id if self._encryption_parameters else None

    @property
    def salt_size(self) -> int:
        return self._salt_size

    @property
    def normalize(self) -> bool:
        return self._normalize

    @property
    def algorithms(self) -> AlgorithmRegistry:
        """All hash algorithms this hasher can read."""
        return self._algorithms

    @property
    def encryption(self) -> EncryptionRegistry:
        """All encryption parameters this hasher can read."""
        return self._encryption

    # -- Hashing ------------------------------------------------------------

    def hash(self, password: str) -> str:
        """
        Hash a password.

        Returns:
            Hash string with the normalization tag, encryption ID, algorithm
            ID, iterations, salt and hash

        Raises:
            EmptyPasswordError: If the password is empty
            NormalizationError: If normalization is enabled and fails
        """
        _check_password(password)

        if self._normalize:
            password = normalize_password(password)

        return self._hash_bytes(_utf8(password), self._normalize)

    def rehash(self, password: str) -> str:
        """
        Hash a password, falling back to unnormalized hashing if normalization fails.

        Used to replace an existing hash on login, where the password may
        predate normalization and contain characters it rejects.
        """
        _check_password(password)

        normalized = False

        if self._normalize:
            result = try_normalize(password)
            if result.ok:
                password = result.value
                normalized = True
            else:
                logger.debug("normalization_fallback", reason=result.reason)

        return self._hash_bytes(_utf8(password), normalized)

    # -- Verification -------------------------------------------------------

    def verify(self, hash_string: str, password: str) -> bool:
        """
        Validate a password against a hash string.

        Returns:
            True if the password is correct

        Raises:
            EmptyPasswordError: If the password is empty
            FormatError: If the hash string is malformed or uses an unknown
                algorithm or encryption ID
        """
        _check_password(password)

        record = self.parse(hash_string)
        expected = record.decrypted_hash_bytes()

        if record.normalized:
            result = try_normalize(password)
            if not result.ok:
                # A password that cannot normalize never matches a normalized hash
                return False
            password = result.value

        actual = _utf8(password)
        for segment in record.chain:
            actual = segment.apply(actual)

        return constant_time_equals(actual, expected)

    def verify_and_upgrade(self, hash_string: str, password: str) -> Tuple[bool, Optional[str]]:
        """
        Verify a password and return a replacement hash if one is needed.

        This is the recommended call for login flows.

        Returns:
            Tuple of (is_valid, new_hash_or_none)
            - a fresh hash from ``rehash`` when ``requires_rehash`` is true
            - otherwise the ``update`` result, normally None
        """
        if not self.verify(hash_string, password):
            return False, None

        if self.requires_rehash(hash_string, password):
            return True, self.rehash(password)

        return True, self.update(hash_string)

    # -- Upgrade policy -----------------------------------------------------

    def requires_rehash(self, hash_string: str, password: str) -> bool:
        """
        Check whether a hash should be regenerated from the known password.

        True if normalization settings differ (and the password can be
        normalized), the encryption parameters are not the main ones, the
        hash is chained, or its algorithm/iterations differ from the main ones.

        Raises:
            EmptyPasswordError: If the password is empty
            FormatError: If the hash string is invalid
        """
        _check_password(password)

        record = self.parse(hash_string)

        if not record.normalized and self._normalize and try_normalize(password).ok:
            return True

        if record.normalized and not self._normalize:
            return True

        if record.encryption_id != self.encryption_id or len(record.chain) > 1:
            return True

        segment = record.chain[0]
        return segment.algorithm.id != self._algorithm.id or segment.iterations != self._iterations

    def requires_update(self, hash_string: str) -> bool:
        """
        Check whether a hash needs to be updated with ``update``.

        True if the encryption parameters are not the main ones or the chain
        has fewer total main-algorithm iterations than required.
        """
        record = self.parse(hash_string)

        if record.encryption_id != self.encryption_id:
            return True

        return record.iterations_for(self._algorithm) < self._iterations

    def update(self, hash_string: str) -> Optional[str]:
        """
        Upgrade a hash without the password.

        Chains a main-algorithm segment covering the missing iterations, or
        re-encrypts the hash with the main encryption parameters. The
        normalization tag is left as it is.

        Returns:
            The updated hash string, or None if no update is required
        """
        record = self.parse(hash_string)

        extra_iterations = self._iterations - record.iterations_for(self._algorithm)

        if extra_iterations <= 0 and record.encryption_id == self.encryption_id:
            return None

        hash_bytes = record.decrypted_hash_bytes()

        if extra_iterations > 0:
            segment = self._new_segment(extra_iterations)
            updated = record.with_hash(
                self._encrypt(segment.apply(hash_bytes)),
                self._encryption_parameters,
                segment,
            )
            logger.debug(
                "hash_chain_extended",
                algorithm=self._algorithm.id,
                extra_iterations=extra_iterations,
                chain_length=len(updated.chain),
                encryption_id=self.encryption_id,
            )
        else:
            updated = record.with_hash(self._encrypt(hash_bytes), self._encryption_parameters)
            logger.debug(
                "hash_reencrypted",
                previous_encryption_id=record.encryption_id,
                encryption_id=self.encryption_id,
            )

        return format_hash(updated)

    def parse(self, hash_string: str) -> HashRecord:
        """
        Parse a hash string against this hasher's registries.

        Raises:
            FormatError: If the hash string is invalid
        """
        return parse_hash(hash_string, self._algorithms, self._encryption)

    # -- Internals ----------------------------------------------------------

    def _new_segment(self, iterations: int) -> ChainSegment:
        salt = self._random_source(self._salt_size)
        return ChainSegment(algorithm=self._algorithm, iterations=iterations, salt=salt)

    def _encrypt(self, hash_bytes: bytes) -> bytes:
        if self._encryption_parameters is None:
            return hash_bytes
        return self._encryption_parameters.encrypt(hash_bytes)

    def _hash_bytes(self, password_bytes: bytes, normalized: bool) -> str:
        segment = self._new_segment(self._iterations)
        record = HashRecord(
            normalized=normalized,
            encryption=self._encryption_parameters,
            chain=(segment,),
            hash_bytes=self._encrypt(segment.apply(password_bytes)),
        )
        return format_hash(record)


def _check_password(password: str) -> None:
    if not password:
        raise EmptyPasswordError()


def _utf8(password: str) -> bytes:
    # Lone surrogates only reach here unnormalized; keep their bytes distinct
    return password.encode("utf-8", "surrogatepass")
