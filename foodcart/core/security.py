"""Security helpers (hashing and verification)."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def is_hashed(stored: object) -> bool:
    return isinstance(stored, str) and stored.startswith(_PREFIX)


def verify_password(password: str, stored: object) -> bool:
    # records written by older clients may hold numbers or null here
    if not isinstance(stored, str) or not stored:
        return False
    if stored.startswith(_PREFIX):
        hashed = stored[len(_PREFIX) :]
        try:
            return _ph.verify(hashed, password)
        except (argon_exc.VerificationError, argon_exc.InvalidHashError, UnicodeEncodeError):
            return False
    # legacy records keep the password in plain text
    try:
        return secrets.compare_digest(stored.encode("utf-8"), password.encode("utf-8"))
    except UnicodeEncodeError:
        return False
