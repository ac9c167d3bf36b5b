"""
AES Hash Encryption
===================
AES ciphers for password hashes, built on the ``cryptography`` package.

Output layouts:
- AES-128-CBC: ``iv (16 bytes) || ciphertext`` with PKCS7 padding
- AES-GCM: ``nonce (12 bytes) || ciphertext || tag (16 bytes)``
"""

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..exceptions import ConfigError, FormatError
from .base import HashEncryptionAlgorithm

AES_BLOCK_BITS = 128
CBC_IV_SIZE = 16
GCM_NONCE_SIZE = 12
GCM_TAG_SIZE = 16


class Aes128CbcEncryption(HashEncryptionAlgorithm):
    """AES with a 128-bit master key in CBC mode and a random IV prepended."""

    def is_valid_key_size(self, size: int) -> bool:
        return size == 16

    def _check_key(self, key: bytes) -> None:
        if not self.is_valid_key_size(len(key)):
            raise ConfigError("Key is not a valid size for AES encryption.")

    def encrypt(self, key: bytes, data: bytes) -> bytes:
        self._check_key(key)

        iv = self._random_bytes(CBC_IV_SIZE)
        padder = padding.PKCS7(AES_BLOCK_BITS).padder()
        padded = padder.update(data) + padder.finalize()

        encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        return iv + encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, key: bytes, encrypted_data: bytes) -> bytes:
        self._check_key(key)

        body = encrypted_data[CBC_IV_SIZE:]
        if not body or len(body) % (AES_BLOCK_BITS // 8):
            raise FormatError("Encrypted data does not contain a valid length IV and ciphertext.")

        iv = encrypted_data[:CBC_IV_SIZE]
        decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = decryptor.update(body) + decryptor.finalize()

        unpadder = padding.PKCS7(AES_BLOCK_BITS).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            raise FormatError("Encrypted hash could not be decrypted.") from None


class AesGcmEncryption(HashEncryptionAlgorithm):
    """Authenticated AES-GCM with a 128, 192 or 256-bit master key."""

    def is_valid_key_size(self, size: int) -> bool:
        return size in (16, 24, 32)

    def encrypt(self, key: bytes, data: bytes) -> bytes:
        if not self.is_valid_key_size(len(key)):
            raise ConfigError("Key is not a valid size for AES-GCM encryption.")

        nonce = self._random_bytes(GCM_NONCE_SIZE)
        return nonce + AESGCM(key).encrypt(nonce, data, None)

    def decrypt(self, key: bytes, encrypted_data: bytes) -> bytes:
        if not self.is_valid_key_size(len(key)):
            raise ConfigError("Key is not a valid size for AES-GCM encryption.")

        if len(encrypted_data) <= GCM_NONCE_SIZE + GCM_TAG_SIZE:
            raise FormatError("Encrypted data is too short to contain a nonce and tag.")

        nonce = encrypted_data[:GCM_NONCE_SIZE]
        try:
            return AESGCM(key).decrypt(nonce, encrypted_data[GCM_NONCE_SIZE:], None)
        except InvalidTag:
            raise FormatError("Encrypted hash failed authentication.") from None


AES128 = Aes128CbcEncryption()
AES_GCM = AesGcmEncryption()
