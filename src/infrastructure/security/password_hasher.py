"""PasswordHasher — passlib-backed hashing and verification of passwords."""

from __future__ import annotations

from collections.abc import Sequence

from passlib.context import CryptContext

DEFAULT_SCHEMES: tuple[str, ...] = ("pbkdf2_sha256",)


class PasswordHasher:
    """Hash and verify passwords with a passlib CryptContext.

    The first scheme hashes new passwords; the others are still accepted by
    verify() and reported as deprecated.
    """

    def __init__(self, schemes: Sequence[str] = DEFAULT_SCHEMES) -> None:
        self.pwd_context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Check a clear password against a stored hash.

        Raises ValueError when hashed_password is not a hash of a known scheme.
        """
        return self.pwd_context.verify(plain_password, hashed_password)

    def is_hashed(self, value: str) -> bool:
        """True when value is recognised as a hash produced by one of the schemes."""
        return self.pwd_context.identify(value) is not None
