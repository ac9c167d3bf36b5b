"""
Unit Tests for Async Password Operations
========================================
"""

import asyncio

from passhash_core import HasherOptions, PasswordHasher, PBKDF2_SHA256
from passhash_core import async_ops


def make_hasher(iterations=1000):
    return PasswordHasher(PBKDF2_SHA256, iterations, HasherOptions(normalize=True))


class TestAsyncOps:
    """Tests for the executor-backed coroutines."""

    def test_hash_and_verify(self):
        """Should hash and verify without blocking the loop."""
        hasher = make_hasher()

        async def scenario():
            hashed = await async_ops.hash_password(hasher, "password")
            return (
                await async_ops.verify_password(hasher, hashed, "password"),
                await async_ops.verify_password(hasher, hashed, "wrong"),
            )

        assert asyncio.run(scenario()) == (True, False)

    def test_update_hash(self):
        """Should chain extra iterations."""
        hashed = make_hasher(1000).hash("password")
        hasher = make_hasher(2000)

        updated = asyncio.run(async_ops.update_hash(hasher, hashed))

        assert updated is not None
        assert hasher.verify(updated, "password") is True
        assert asyncio.run(async_ops.update_hash(hasher, updated)) is None

    def test_verify_and_upgrade(self):
        """Should return a replacement hash for outdated hashes."""
        hashed = make_hasher(1000).hash("password")
        hasher = make_hasher(2000)

        valid, new_hash = asyncio.run(async_ops.verify_and_upgrade(hasher, hashed, "password"))

        assert valid is True
        assert hasher.requires_rehash(new_hash, "password") is False

    def test_concurrent_hashing(self):
        """Should handle several hashes at once."""
        hasher = make_hasher()

        async def scenario():
            return await asyncio.gather(
                *(async_ops.hash_password(hasher, f"password{i}") for i in range(4))
            )

        hashes = asyncio.run(scenario())

        assert len(set(hashes)) == 4
        assert all(hasher.verify(h, f"password{i}") for i, h in enumerate(hashes))
