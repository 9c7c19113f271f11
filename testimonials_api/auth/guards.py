# testimonials_api/auth/guards.py
"""
FastAPI dependencies guarding protected routes.

Routes declare the chain explicitly, e.g.

    @router.post("", dependencies=[Depends(require_role(RoleEnum.admin))])

which authenticates the bearer token (401 on failure) and then checks the
principal's role (403 on mismatch) before the handler runs.
"""

import logging
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException, status

from testimonials_api.auth.roles import Principal, RoleEnum
from testimonials_api.auth.tokens import InvalidTokenError, verify_access_token

logger = logging.getLogger(__name__)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def authenticate(authorization: Optional[str] = Header(None)) -> Principal:
    if not authorization:
        logger.warning("AUTH: missing Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header",
            headers=_UNAUTHORIZED_HEADERS,
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        logger.warning("AUTH: invalid Authorization header format")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format. Expected 'Bearer <token>'",
            headers=_UNAUTHORIZED_HEADERS,
        )

    try:
        principal = verify_access_token(token.strip())
    except InvalidTokenError as e:
        logger.warning("AUTH: rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers=_UNAUTHORIZED_HEADERS,
        )

    return principal


def authorize(principal: Principal, *roles: RoleEnum) -> Principal:
    if principal.role not in roles:
        logger.warning(
            "AUTH: principal %s with role %s denied (requires %s)",
            principal.id,
            principal.role.value,
            ", ".join(r.value for r in roles),
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient role",
        )
    return principal


def require_role(*roles: RoleEnum) -> Callable[..., Principal]:
    def dependency(principal: Principal = Depends(authenticate)) -> Principal:
        return authorize(principal, *roles)

    return dependency
