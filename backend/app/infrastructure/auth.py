"""Auth Collaborators — bcrypt password hashing and JWT issuance.

Invariants:
    - Raw passwords are only ever passed in; never returned or logged
    - Passwords are truncated to 72 UTF-8 bytes before hashing and verifying
    - Tokens are HS256 JWTs bound to the user's id and username
    - decode_user_token raises jwt.InvalidTokenError on bad signature or expiry

Design Decisions:
    - bcrypt with an explicit work factor (settings.bcrypt_rounds, default 10)
    - PyJWT, payload {"data": {...}, "exp"}: the user identity lives under "data"
"""

import time

import bcrypt
import jwt

from app.config import get_settings
from app.core.repository_protocols import UserLike

JWT_ALGORITHM = "HS256"
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases reject longer input
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """One-way bcrypt hash of password, returned as a utf-8 string."""
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(
        _password_bytes(password), hashed_password.encode("utf-8"),
    )


def get_user_token(user: UserLike) -> str:
    """Issue a bearer token for the given user."""
    settings = get_settings()
    payload = {
        "data": {"id": user.id, "username": user.username},
        "exp": int(time.time()) + settings.jwt_expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=JWT_ALGORITHM)


def decode_user_token(token: str) -> dict:
    """Verify a token and return its payload."""
    return jwt.decode(
        token, get_settings().jwt_secret, algorithms=[JWT_ALGORITHM],
    )
