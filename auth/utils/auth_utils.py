from datetime import datetime, timedelta, timezone

import jwt

from auth.schemas import Identity
from core.config_loader import settings


def create_token(username: str, is_admin: bool = False, expires_minutes: int | None = None) -> str:
    """Sign an ``{username, isAdmin}`` payload with the shared secret."""
    payload = {"username": username, "isAdmin": is_admin, "iat": datetime.now(timezone.utc)}
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    if minutes is not None:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Identity:
    """Verify signature (and expiry, when present) and return the claim.

    Raises ``jwt.InvalidTokenError`` for bad, expired or malformed tokens
    and ``pydantic.ValidationError`` when the claims have the wrong types.
    """
    claims = jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["username"]},
    )
    return Identity.model_validate(claims)
