"""
Unit Tests for Password Hash Algorithms
=======================================
PBKDF2, Argon2 and bcrypt-pbkdf.
"""

import pytest

from passhash_core import (
    Argon2HashAlgorithm,
    Argon2Type,
    Argon2Version,
    BcryptPbkdfHashAlgorithm,
    ConfigError,
    HasherOptions,
    PasswordHasher,
    Pbkdf2HashAlgorithm,
    PBKDF2_SHA1,
    PBKDF2_SHA256,
    PBKDF2_SHA384,
    PBKDF2_SHA512,
)


class TestPbkdf2:
    """Tests for the PBKDF2 algorithms."""

    def test_rfc6070_vector(self):
        """Should match the RFC 6070 PBKDF2-HMAC-SHA1 test vector."""
        result = PBKDF2_SHA1.hash(b"password", b"salt", 1)

        assert result.hex() == "0c60c80f961f0e71f3a9b524af6012062fe037a6"

    @pytest.mark.parametrize(
        "algorithm,size",
        [(PBKDF2_SHA256, 32), (PBKDF2_SHA384, 48), (PBKDF2_SHA512, 64)],
    )
    def test_output_size(self, algorithm, size):
        """Should output one digest of bytes."""
        assert len(algorithm.hash(b"password", b"saltsalt", 2)) == size

    def test_ids(self):
        """Should use stable wire IDs."""
        assert [a.id for a in (PBKDF2_SHA1, PBKDF2_SHA256, PBKDF2_SHA384, PBKDF2_SHA512)] == [
            "SHA1", "SHA256", "SHA384", "SHA512",
        ]
        assert PBKDF2_SHA1.legacy_only is True
        assert PBKDF2_SHA256.legacy_only is False

    @pytest.mark.parametrize("algorithm_id", ["", "SHA 256", "SHA!", "#1", "a~b", "A:B", "50%"])
    def test_reserved_ids(self, algorithm_id):
        """Should reject empty IDs and reserved characters."""
        with pytest.raises(ConfigError):
            Pbkdf2HashAlgorithm(algorithm_id, "sha256", 32)


class TestArgon2:
    """Tests for Argon2."""

    def test_id(self):
        """Should encode all parameters in the ID."""
        algorithm = Argon2HashAlgorithm(
            Argon2Type.ARGON2ID, Argon2Version.V19, parallelism=4, memory_size=512
        )

        assert algorithm.id == "Argon2idV19-128-4P-512MB"

    def test_id_variants(self):
        """Should include type, version and output bits."""
        algorithm = Argon2HashAlgorithm(
            Argon2Type.ARGON2I, Argon2Version.V16, memory_size=1, output_size=32
        )

        assert algorithm.id == "Argon2iV16-256-1P-1MB"

    def test_hash_deterministic(self):
        """Should be deterministic for the same inputs."""
        algorithm = Argon2HashAlgorithm(memory_size=1)

        first = algorithm.hash(b"password", b"saltsaltsalt", 1)

        assert len(first) == 16
        assert first == algorithm.hash(b"password", b"saltsaltsalt", 1)
        assert first != algorithm.hash(b"password", b"saltsaltsalt", 2)

    @pytest.mark.parametrize(
        "kwargs",
        [{"parallelism": 0}, {"memory_size": 0}, {"output_size": 3}],
    )
    def test_invalid_parameters(self, kwargs):
        """Should reject unusable parameters."""
        with pytest.raises(ConfigError):
            Argon2HashAlgorithm(**kwargs)

    def test_hasher(self):
        """Should work as the main algorithm of a hasher."""
        algorithm = Argon2HashAlgorithm(memory_size=1)
        hasher = PasswordHasher(algorithm, 2, HasherOptions(normalize=True))

        hashed = hasher.hash("password")

        assert hashed.startswith("!1 Argon2idV19-128-1P-1MB:2:")
        assert hasher.verify(hashed, "password") is True
        assert hasher.verify(hashed, "Password") is False


class TestBcryptPbkdf:
    """Tests for bcrypt-pbkdf."""

    def test_id(self):
        """Should encode the output size in bits."""
        assert BcryptPbkdfHashAlgorithm().id == "BCRYPT-PBKDF256"
        assert BcryptPbkdfHashAlgorithm(output_size=64).id == "BCRYPT-PBKDF512"

    def test_hash(self):
        """Should produce output of the configured size."""
        algorithm = BcryptPbkdfHashAlgorithm()

        first = algorithm.hash(b"password", b"saltsalt", 2)

        assert len(first) == 32
        assert first == algorithm.hash(b"password", b"saltsalt", 2)

    @pytest.mark.parametrize("output_size", [0, 513])
    def test_invalid_output_size(self, output_size):
        """Should reject output sizes bcrypt.kdf cannot produce."""
        with pytest.raises(ConfigError):
            BcryptPbkdfHashAlgorithm(output_size=output_size)

    def test_legacy_chain(self):
        """Should chain PBKDF2 on top of a bcrypt-pbkdf hash."""
        bcrypt_hasher = PasswordHasher(
            BcryptPbkdfHashAlgorithm(), 2, HasherOptions(normalize=False)
        )
        hasher = PasswordHasher(
            PBKDF2_SHA256,
            100,
            HasherOptions(normalize=False, legacy_hash_algorithms=[BcryptPbkdfHashAlgorithm()]),
        )

        updated = hasher.update(bcrypt_hasher.hash("password"))

        assert updated.startswith("BCRYPT-PBKDF256:2:")
        assert " SHA256:100:" in updated
        assert hasher.verify(updated, "password") is True
