"""
Hash Records
============
Structured form of a stored hash string, and the codec between the two.

Wire format (tokens separated by ASCII spaces)::

    [!1] [#<encryption id>] <algorithm id>:<iterations>:<base64 salt> ... <base64 hash>

- ``!1`` marks a password that was normalized before hashing
- ``#<id>`` marks hash bytes encrypted with the given encryption parameters
- one or more chain segments follow; each segment's output is the next
  segment's input
- the last token holds the (possibly encrypted) output of the last segment

Records without either tag predate those features and stay readable.
"""

import base64
import binascii
import re
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

from .algorithms import PasswordHashAlgorithm
from .encryption import HashEncryptionParameters
from .exceptions import FormatError

SEPARATOR = " "
SEGMENT_SEPARATOR = ":"
NORMALIZATION_TAG = "!"
ENCRYPTION_TAG = "#"
NORMALIZATION_VERSION = "1"

_ITERATIONS_PATTERN = re.compile(r"[0-9]+")
_ENCRYPTION_ID_PATTERN = re.compile(r"-?[0-9]+")

# Largest value stored hashes may carry for iterations or encryption IDs
MAX_STORED_INT = 2**31 - 1


@dataclass(frozen=True)
class ChainSegment:
    """One (algorithm, iterations, salt) step of a hash chain."""
    algorithm: PasswordHashAlgorithm
    iterations: int
    salt: bytes

    def apply(self, data: bytes) -> bytes:
        """Run this segment's algorithm over ``data``."""
        return self.algorithm.hash(data, self.salt, self.iterations)

    def __str__(self) -> str:
        return SEGMENT_SEPARATOR.join(
            (self.algorithm.id, str(self.iterations), _b64encode(self.salt))
        )


@dataclass(frozen=True)
class HashRecord:
    """A parsed password hash."""
    normalized: bool
    encryption: Optional[HashEncryptionParameters]
    chain: Tuple[ChainSegment, ...]
    hash_bytes: bytes

    def __post_init__(self):
        if not self.chain:
            raise ValueError("Hash chain must contain at least one segment")
        if not self.hash_bytes:
            raise ValueError("Hash bytes cannot be empty")

    @property
    def encryption_id(self) -> Optional[int]:
        return self.encryption.id if self.encryption is not None else None

    def iterations_for(self, algorithm: PasswordHashAlgorithm) -> int:
        """Total iterations performed with ``algorithm`` across the chain."""
        return sum(s.iterations for s in self.chain if s.algorithm.id == algorithm.id)

    def decrypted_hash_bytes(self) -> bytes:
        """Hash bytes with any at-rest encryption removed."""
        if self.encryption is None:
            return self.hash_bytes
        return self.encryption.decrypt(self.hash_bytes)

    def with_hash(
        self,
        hash_bytes: bytes,
        encryption: Optional[HashEncryptionParameters],
        segment: Optional[ChainSegment] = None,
    ) -> "HashRecord":
        """Copy of this record with new hash bytes, optionally chaining one more segment."""
        chain = self.chain + (segment,) if segment is not None else self.chain
        return replace(self, encryption=encryption, chain=chain, hash_bytes=hash_bytes)


def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def _b64decode(value: str, what: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise FormatError(f"Could not convert base64 {what} '{value}'") from None


def parse_segment(token: str, algorithms: Mapping[str, PasswordHashAlgorithm]) -> ChainSegment:
    """Parse an ``<algorithm id>:<iterations>:<base64 salt>`` token."""
    parts = token.split(SEGMENT_SEPARATOR)

    if len(parts) != 3:
        raise FormatError("Incorrect number of hash info parts.")

    algorithm_id, iterations_str, salt_b64 = parts

    algorithm = algorithms.get(algorithm_id)
    if algorithm is None:
        raise FormatError(f"Unknown hash algorithm ID '{algorithm_id}'.")

    if not _ITERATIONS_PATTERN.fullmatch(iterations_str):
        raise FormatError(f"Could not parse iteration count '{iterations_str}'")

    iterations = int(iterations_str)
    if iterations > MAX_STORED_INT:
        raise FormatError(f"Could not parse iteration count '{iterations_str}'")

    if iterations <= 0:
        raise FormatError(f"Iteration count must be positive, got '{iterations_str}'")

    salt = _b64decode(salt_b64, "salt")
    if not salt:
        raise FormatError("Salt cannot be empty.")

    return ChainSegment(algorithm=algorithm, iterations=iterations, salt=salt)


def parse_hash(
    hash_string: str,
    algorithms: Mapping[str, PasswordHashAlgorithm],
    encryption: Mapping[int, HashEncryptionParameters],
) -> HashRecord:
    """
    Parse a stored hash string.

    Args:
        hash_string: The stored hash string
        algorithms: Readable algorithms by ID
        encryption: Readable encryption parameters by ID

    Returns:
        The parsed HashRecord

    Raises:
        FormatError: If the string is malformed or references an unknown
            algorithm or encryption ID
    """
    tokens = [t for t in hash_string.split(SEPARATOR) if t]

    if len(tokens) < 2:
        raise FormatError("Missing hash parts.")

    skip = 0
    normalized = False

    if tokens[0].startswith(NORMALIZATION_TAG):
        version = tokens[0][len(NORMALIZATION_TAG):]
        if version != NORMALIZATION_VERSION:
            raise FormatError(f"Unknown normalization version '{version}'.")
        normalized = True
        skip += 1

    parameters = None

    if tokens[skip].startswith(ENCRYPTION_TAG):
        id_str = tokens[skip][len(ENCRYPTION_TAG):]
        if not _ENCRYPTION_ID_PATTERN.fullmatch(id_str):
            raise FormatError(f"Invalid encryption ID '{id_str}'.")

        parameters_id = int(id_str)
        if not -MAX_STORED_INT - 1 <= parameters_id <= MAX_STORED_INT:
            raise FormatError(f"Invalid encryption ID '{id_str}'.")

        parameters = encryption.get(parameters_id)
        if parameters is None:
            raise FormatError(f"Unknown encryption ID '{id_str}'.")
        skip += 1

    if len(tokens) < skip + 2:
        raise FormatError("Missing hash parts.")

    chain = tuple(parse_segment(t, algorithms) for t in tokens[skip:-1])

    hash_bytes = _b64decode(tokens[-1], "hash")
    if not hash_bytes:
        raise FormatError("Hashing result cannot be empty.")

    return HashRecord(
        normalized=normalized,
        encryption=parameters,
        chain=chain,
        hash_bytes=hash_bytes,
    )


def format_hash(record: HashRecord) -> str:
    """Serialize a HashRecord to its stored string form."""
    tokens = []

    if record.normalized:
        tokens.append(NORMALIZATION_TAG + NORMALIZATION_VERSION)

    if record.encryption is not None:
        tokens.append(f"{ENCRYPTION_TAG}{record.encryption.id}")

    tokens.extend(str(segment) for segment in record.chain)
    tokens.append(_b64encode(record.hash_bytes))

    return SEPARATOR.join(tokens)
