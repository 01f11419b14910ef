import logging
from dataclasses import dataclass

import jwt
from fastapi import HTTPException, Request, status

from backend.auth import jwt_handler
from backend.core import config

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED_DETAIL = "Not authenticated"


@dataclass(frozen=True)
class SessionIdentity:
    email: str
    role: str


def _reject() -> HTTPException:
    # Same response for every failure; only the log line says why.
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=NOT_AUTHENTICATED_DETAIL,
    )


def get_current_identity(request: Request) -> SessionIdentity:
    """Admit the request only with a valid session cookie.

    Raising here stops FastAPI before the route handler runs, so a rejected
    request has no handler side effects.
    """
    token = request.cookies.get(config.SESSION_COOKIE_NAME)
    if not token:
        logger.info("Rejected %s %s: no session token", request.method, request.url.path)
        raise _reject()

    try:
        payload = jwt_handler.decode_access_token(token)
    except jwt.PyJWTError as exc:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        raise _reject() from exc

    identity = SessionIdentity(email=payload["email"], role=payload["role"])
    request.state.identity = identity
    return identity
