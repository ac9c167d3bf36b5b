"""
Unit Tests for Hash Encryption
==============================
AES ciphers and encryption parameters.
"""

import pytest

from passhash_core import (
    AES128,
    AES_GCM,
    Aes128CbcEncryption,
    AesGcmEncryption,
    ConfigError,
    FormatError,
    HashEncryptionParameters,
)

KEY_16 = bytes(range(16))
KEY_32 = bytes(range(32))


class TestAes128Cbc:
    """Tests for AES-128-CBC."""

    def test_round_trip(self):
        """Should decrypt what it encrypts."""
        data = b"password hash bytes"

        assert AES128.decrypt(KEY_16, AES128.encrypt(KEY_16, data)) == data

    def test_randomized(self):
        """Should never produce the same ciphertext twice."""
        assert AES128.encrypt(KEY_16, b"data") != AES128.encrypt(KEY_16, b"data")

    def test_layout(self):
        """Should prepend the IV from the random source."""
        cipher = Aes128CbcEncryption(random_source=lambda n: b"\x01" * n)

        encrypted = cipher.encrypt(KEY_16, b"sixteen bytes!!!")

        assert encrypted[:16] == b"\x01" * 16
        assert len(encrypted) == 16 + 32  # full padding block added

    def test_key_sizes(self):
        """Should only accept 128-bit keys."""
        assert AES128.is_valid_key_size(16) is True
        assert AES128.is_valid_key_size(24) is False
        assert AES128.is_valid_key_size(32) is False

        with pytest.raises(ConfigError):
            AES128.encrypt(KEY_32, b"data")

    @pytest.mark.parametrize("length", [0, 16, 17, 31])
    def test_invalid_length(self, length):
        """Should reject data without an IV and whole ciphertext blocks."""
        with pytest.raises(FormatError):
            AES128.decrypt(KEY_16, bytes(length))


class TestAesGcm:
    """Tests for AES-GCM."""

    @pytest.mark.parametrize("size", [16, 24, 32])
    def test_round_trip(self, size):
        """Should decrypt what it encrypts for every key size."""
        key = bytes(range(size))

        assert AES_GCM.decrypt(key, AES_GCM.encrypt(key, b"hash")) == b"hash"

    def test_layout(self):
        """Should output nonce, ciphertext and tag."""
        cipher = AesGcmEncryption(random_source=lambda n: bytes(n))

        encrypted = cipher.encrypt(KEY_32, b"hash")

        assert encrypted[:12] == bytes(12)
        assert len(encrypted) == 12 + 4 + 16

    def test_tampered(self):
        """Should reject modified ciphertext."""
        encrypted = bytearray(AES_GCM.encrypt(KEY_32, b"hash"))
        encrypted[-1] ^= 1

        with pytest.raises(FormatError):
            AES_GCM.decrypt(KEY_32, bytes(encrypted))

    def test_wrong_key(self):
        """Should reject ciphertext from another key."""
        encrypted = AES_GCM.encrypt(KEY_32, b"hash")

        with pytest.raises(FormatError):
            AES_GCM.decrypt(bytes(32), encrypted)

    def test_too_short(self):
        """Should reject data shorter than nonce and tag."""
        with pytest.raises(FormatError):
            AES_GCM.decrypt(KEY_32, bytes(28))


class TestHashEncryptionParameters:
    """Tests for encryption parameters."""

    def test_encrypt_decrypt(self):
        """Should use the bound key and algorithm."""
        params = HashEncryptionParameters(1, AES_GCM, KEY_32)

        assert params.decrypt(params.encrypt(b"hash")) == b"hash"
        assert params.id == 1
        assert params.algorithm is AES_GCM

    def test_invalid_key_size(self):
        """Should reject keys the algorithm cannot use."""
        with pytest.raises(ConfigError):
            HashEncryptionParameters(1, AES128, bytes(15))

    @pytest.mark.parametrize("param_id", [True, "1", 1.0])
    def test_invalid_id(self, param_id):
        """Should require an integer ID."""
        with pytest.raises(ConfigError):
            HashEncryptionParameters(param_id, AES128, KEY_16)

    def test_key_copied(self):
        """Should not see later changes to the caller's key buffer."""
        key = bytearray(KEY_16)
        params = HashEncryptionParameters(1, AES128, key)
        encrypted = params.encrypt(b"hash")

        key[0] ^= 0xFF

        assert params.decrypt(encrypted) == b"hash"

    def test_repr_hides_key(self):
        """Should never include the key in its repr."""
        params = HashEncryptionParameters(7, AES128, b"secretsecretsecr")

        assert "secret" not in repr(params)
        assert "id=7" in repr(params)
