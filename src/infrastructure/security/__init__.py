"""Credential hashing."""

from .password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
