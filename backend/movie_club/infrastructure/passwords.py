"""Password Hashing — bcrypt wrapper for stored credentials.

Invariants:
    - Only the hash is ever returned; plaintext is never stored or logged
    - Inputs are UTF-8 encoded and cut to bcrypt's 72-byte limit in both
      hash_password and check_password, so the two always agree
    - check_password returns False on a malformed hash instead of raising
"""

import bcrypt

BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 10


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a salted bcrypt hash of the password."""
    return bcrypt.hashpw(_encode(plain), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def check_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode("ascii"))
    except (ValueError, UnicodeEncodeError):
        return False
