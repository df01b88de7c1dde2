"""FastAPI dependencies for authentication and authorization."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cinetheque.config import get_settings
from cinetheque.domain.identity.principal import Principal
from cinetheque.exceptions import ForbiddenError, UnauthorizedError
from cinetheque.infrastructure.identity.auth.oauth_client import OAuthClient
from cinetheque.infrastructure.identity.auth.token_service import verify_session_token

bearer_scheme = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]


def is_public_path(path: str) -> bool:
    """Check a request path against the configured public paths."""
    return any(
        path == public or path.startswith(public.rstrip("/") + "/")
        for public in get_settings().PUBLIC_PATHS
    )


def _authenticate(request: Request, credentials: HTTPAuthorizationCredentials | None) -> Principal:
    principal = getattr(request.state, "principal", None)
    if principal is not None:
        return principal

    token = (
        credentials.credentials
        if credentials
        else request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    )
    if not token:
        raise UnauthorizedError("invalid_request", "Authentication is required.")

    principal = verify_session_token(token)
    if principal is None:
        raise UnauthorizedError("invalid_token", "The session token is invalid or expired.")

    request.state.principal = principal
    return principal


async def security_chain(request: Request, credentials: BearerCredentials) -> None:
    """
    Application-wide filter run before every route.

    Public paths pass through; every other path needs a valid session token
    sent as a Bearer header or in the session cookie.
    """
    if is_public_path(request.url.path):
        return
    _authenticate(request, credentials)


async def get_current_principal(request: Request, credentials: BearerCredentials) -> Principal:
    """
    Get the authenticated principal of the request.

    Raises:
        UnauthorizedError: If no valid session token was sent
    """
    return _authenticate(request, credentials)


def require_authority(authority: str) -> Callable[[Principal], Principal]:
    """Route dependency that lets only principals holding ``authority`` through."""

    def dependency(principal: Annotated[Principal, Depends(get_current_principal)]) -> Principal:
        if not principal.has_authority(authority):
            raise ForbiddenError(f"The '{authority}' authority is required for this operation.")
        return principal

    return dependency


def get_oauth_client() -> OAuthClient:
    """Get the identity provider client."""
    return OAuthClient(get_settings())
