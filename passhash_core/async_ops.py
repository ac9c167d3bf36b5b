"""
Async Password Hashing
======================
Async-safe wrappers that run the CPU-bound hasher calls in a thread pool.
"""

import asyncio
from functools import partial
from typing import Optional, Tuple

from .hasher import PasswordHasher


async def _run(func, *args):
    loop = asyncio.get_running_loop()
    # Run in executor to avoid blocking the event loop
    return await loop.run_in_executor(None, partial(func, *args))


async def hash_password(hasher: PasswordHasher, password: str) -> str:
    """
    Hash a password without blocking the event loop.

    Args:
        hasher: Configured password hasher
        password: Plain text password to hash

    Returns:
        Hash string
    """
    return await _run(hasher.hash, password)


async def verify_password(hasher: PasswordHasher, hash_string: str, password: str) -> bool:
    """
    Verify a password against a hash string without blocking the event loop.

    Raises:
        FormatError: If the hash string is invalid
    """
    return await _run(hasher.verify, hash_string, password)


async def update_hash(hasher: PasswordHasher, hash_string: str) -> Optional[str]:
    """Upgrade a stored hash without the password, or return None if current."""
    return await _run(hasher.update, hash_string)


async def verify_and_upgrade(
    hasher: PasswordHasher,
    hash_string: str,
    password: str,
) -> Tuple[bool, Optional[str]]:
    """
    Verify a password and return a new hash if an upgrade is needed.

    This is the recommended function for login flows.

    Returns:
        Tuple of (is_valid, new_hash_or_none)

    Example:
        >>> valid, new_hash = await verify_and_upgrade(hasher, stored_hash, password)
        >>> if valid:
        >>>     if new_hash:
        >>>         await update_user_password_hash(user_id, new_hash)
        >>>     # Continue with login
    """
    return await _run(hasher.verify_and_upgrade, hash_string, password)
