"""
Algorithm and Encryption Registries
===================================
Read-only lookups from wire-format IDs to algorithms and encryption parameters.

Registries are built once from the main entry plus any legacy entries and are
never modified afterwards, so they can be read from many threads at once.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from .algorithms import PasswordHashAlgorithm
from .encryption import HashEncryptionParameters
from .exceptions import ConfigError


class AlgorithmRegistry(Mapping[str, PasswordHashAlgorithm]):
    """Algorithm ID -> password hash algorithm."""

    def __init__(self, main: PasswordHashAlgorithm, legacy: Iterable[PasswordHashAlgorithm] = ()):
        lookup: Dict[str, PasswordHashAlgorithm] = {main.id: main}

        for algorithm in legacy:
            if algorithm.id in lookup:
                raise ConfigError(
                    f"An algorithm with ID '{algorithm.id}' has already been added to the hasher."
                )
            lookup[algorithm.id] = algorithm

        self._lookup = MappingProxyType(lookup)

    def __getitem__(self, algorithm_id: str) -> PasswordHashAlgorithm:
        return self._lookup[algorithm_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lookup)

    def __len__(self) -> int:
        return len(self._lookup)


class EncryptionRegistry(Mapping[int, HashEncryptionParameters]):
    """Encryption parameter ID -> encryption parameters."""

    def __init__(
        self,
        main: Optional[HashEncryptionParameters],
        legacy: Iterable[HashEncryptionParameters] = (),
    ):
        lookup: Dict[int, HashEncryptionParameters] = {}
        if main is not None:
            lookup[main.id] = main

        for parameters in legacy:
            if parameters.id in lookup:
                raise ConfigError(
                    f"A parameter with ID '{parameters.id}' has already been added to the hasher."
                )
            lookup[parameters.id] = parameters

        self._lookup = MappingProxyType(lookup)

    def __getitem__(self, parameters_id: int) -> HashEncryptionParameters:
        return self._lookup[parameters_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._lookup)

    def __len__(self) -> int:
        return len(self._lookup)

