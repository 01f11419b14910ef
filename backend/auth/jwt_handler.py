from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config

REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp"]


def token_lifetime() -> timedelta:
    return timedelta(minutes=config.JWT_EXPIRES_MINUTES)


def create_access_token(
    email: str,
    role: str,
    expires_minutes: int | None = None,
    issued_at: datetime | None = None,
) -> str:
    expire_minutes = expires_minutes or config.JWT_EXPIRES_MINUTES
    issued = issued_at or datetime.now(timezone.utc)
    expire = issued + timedelta(minutes=expire_minutes)
    payload = {"sub": email, "email": email, "role": role, "iat": issued, "exp": expire}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry; raises ``jwt.PyJWTError`` on any failure."""
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": REQUIRED_CLAIMS},
    )
