# testimonials_api/auth/tokens.py
"""
Bearer token minting and verification (HS256 JWT).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from testimonials_api.auth.roles import Principal, RoleEnum
from testimonials_api.config import (
    AUTH_JWT_ALGORITHM,
    AUTH_JWT_EXPIRES_IN,
    AUTH_JWT_SECRET,
)


class InvalidTokenError(Exception):
    """Token could not be turned into a Principal."""


def create_access_token(
    subject: str,
    role: RoleEnum,
    expires_in: Optional[int] = None,
    secret: str = AUTH_JWT_SECRET,
) -> str:
    now = datetime.now(timezone.utc)
    if expires_in is None:
        expires_in = AUTH_JWT_EXPIRES_IN

    payload = {
        "sub": str(subject),
        "role": RoleEnum(role).value,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm=AUTH_JWT_ALGORITHM)


def verify_access_token(token: str, secret: str = AUTH_JWT_SECRET) -> Principal:
    """
    Decode a token and return its Principal.

    Raises InvalidTokenError on a bad signature, an expired token, or
    missing/unknown claims.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[AUTH_JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e)) from e

    try:
        role = RoleEnum(payload.get("role"))
    except ValueError:
        raise InvalidTokenError(f"unknown role {payload.get('role')!r}")

    return Principal(id=str(payload["sub"]), role=role)
