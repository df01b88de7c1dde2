"""Session token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from cinetheque.config import get_settings
from cinetheque.domain.identity.principal import Principal

ALGORITHM = "HS256"
TOKEN_TYPE = "session"


def create_session_token(principal: Principal) -> str:
    """Create a signed session token carrying the principal's claims."""
    settings = get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    to_encode = {
        "sub": principal.subject,
        "name": principal.name,
        "email": principal.email,
        "authorities": sorted(principal.authorities),
        "exp": expire,
        "type": TOKEN_TYPE,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_session_token(token: str) -> Principal | None:
    """Verify a session token and return its principal if valid."""
    try:
        payload = jwt.decode(token, get_settings().SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError:
        return None

    if payload.get("type") != TOKEN_TYPE:
        return None
    subject = payload.get("sub")
    if not subject:
        return None

    return Principal(
        subject=str(subject),
        name=payload.get("name"),
        email=payload.get("email"),
        authorities=frozenset(payload.get("authorities") or ()),
    )
