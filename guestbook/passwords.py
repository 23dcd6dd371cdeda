"""Password hashing for stored accounts.

Databases created by the earlier guestbook server hold plaintext passwords.
Those still verify, and are replaced by a pbkdf2 hash on the next good login.
"""
from __future__ import annotations

from typing import Optional

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

pwd_context = CryptContext(schemes=["pbkdf2_sha256", "plaintext"], deprecated=["plaintext"])


async def hash_password(password: str) -> str:
    return await run_in_threadpool(pwd_context.hash, password)


async def verify_and_update(plain: str, hashed: str) -> tuple[bool, Optional[str]]:
    """Check a password. Returns (valid, new_hash); new_hash is set when the stored value should be upgraded."""
    if not plain or not hashed:
        return False, None
    return await run_in_threadpool(pwd_context.verify_and_update, plain, hashed)
