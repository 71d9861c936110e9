"""JWT authentication dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog
from fastapi import Depends, HTTPException, Request

log = structlog.get_logger(__name__)


@dataclass
class AdminUser:
    user_id: str
    email: str | None = None
    token: str = field(default="", repr=False)
    claims: dict[str, Any] = field(default_factory=dict)


def _validate_jwt(token: str, secret: str) -> dict[str, Any] | None:
    """Validate a Supabase JWT and return its claims."""
    from jose import JWTError
    from jose import jwt as jose_jwt

    try:
        return jose_jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            audience="authenticated",
        )
    except JWTError:
        return None


async def get_current_user(request: Request) -> AdminUser | None:
    """Extract and validate the admin from the bearer token.

    Returns None if no credentials are provided.
    Raises 401 if the token is invalid or expired.
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return None

    token = auth_header[7:]
    claims = _validate_jwt(token, request.app.state.settings.jwt_secret)
    if claims is None:
        log.info("token_rejected", path=request.url.path)
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return AdminUser(
        user_id=claims.get("sub", ""),
        email=claims.get("email"),
        token=token,
        claims=claims,
    )


async def require_auth(
    user: AdminUser | None = Depends(get_current_user),
) -> AdminUser:
    """Dependency that rejects anonymous requests."""
    if user is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return user
