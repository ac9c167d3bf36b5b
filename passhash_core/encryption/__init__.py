"""
Hash Encryption
===============
Optional encryption of password hash bytes at rest, with key rotation.
"""

from .base import HashEncryptionAlgorithm, RandomSource
from .aes import Aes128CbcEncryption, AesGcmEncryption, AES128, AES_GCM
from .parameters import HashEncryptionParameters

__all__ = [
    "HashEncryptionAlgorithm",
    "RandomSource",
    "Aes128CbcEncryption",
    "AesGcmEncryption",
    "AES128",
    "AES_GCM",
    "HashEncryptionParameters",
]
