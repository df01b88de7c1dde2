import logging
import secrets
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from cinetheque.config import get_settings
from cinetheque.domain.identity.principal import Principal
from cinetheque.exceptions import UnauthorizedError
from cinetheque.infrastructure.identity.auth.oauth_client import OAuthClient
from cinetheque.infrastructure.identity.auth.token_service import create_session_token
from cinetheque.infrastructure.identity.dependencies import get_current_principal, get_oauth_client
from cinetheque.infrastructure.identity.schemas import PrincipalResponse, SessionResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address)
settings = get_settings()

STATE_COOKIE_NAME = "oauth_state"
STATE_COOKIE_MAX_AGE = 10 * 60  # ten minutes to complete the login at the provider


def _set_session_cookie(response: Response, token: str) -> None:
    """Set the session token as an httpOnly cookie."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
    )


def _clear_session_cookie(response: Response) -> None:
    """Clear the session token cookie."""
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )


@router.get("/login", status_code=status.HTTP_302_FOUND)
@limiter.limit("10/minute")  # type: ignore[misc]
async def login(
    request: Request,
    client: Annotated[OAuthClient, Depends(get_oauth_client)],
) -> RedirectResponse:
    """Start the authorization-code flow by redirecting to the identity provider."""
    state = secrets.token_urlsafe(32)
    response = RedirectResponse(client.authorization_url(state), status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=STATE_COOKIE_NAME,
        value=state,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=STATE_COOKIE_MAX_AGE,
        path="/auth",
    )
    return response


@router.get("/callback", response_model=SessionResponse)
@limiter.limit("10/minute")  # type: ignore[misc]
async def callback(
    request: Request,
    client: Annotated[OAuthClient, Depends(get_oauth_client)],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    expected_state: Annotated[str | None, Cookie(alias=STATE_COOKIE_NAME)] = None,
) -> JSONResponse:
    """
    Finish the authorization-code flow and open a session.

    Raises:
        UnauthorizedError: If the provider reported an error, the state does
            not match the one issued at login, or the code exchange fails
    """
    if error:
        logger.info(f"Identity provider returned error: {error}")
        raise UnauthorizedError(error, "The identity provider rejected the authorization request.")
    if not code or not state or not expected_state:
        raise UnauthorizedError("invalid_request", "The authorization response is incomplete.")
    if not secrets.compare_digest(state, expected_state):
        raise UnauthorizedError("invalid_request", "The authorization state does not match.")

    access_token = await client.exchange_code(code)
    principal = await client.fetch_user_info(access_token)
    token = create_session_token(principal)
    logger.info(f"Session opened for subject {principal.subject}")

    session = SessionResponse(
        access_token=token,
        token_type="bearer",  # noqa: S106
        expires_in=settings.SESSION_EXPIRE_MINUTES * 60,
    )
    response = JSONResponse(content=session.model_dump())
    _set_session_cookie(response, token)
    response.delete_cookie(key=STATE_COOKIE_NAME, path="/auth")
    return response


@router.get("/me", response_model=PrincipalResponse)
def me(principal: Annotated[Principal, Depends(get_current_principal)]) -> PrincipalResponse:
    """Return the authenticated caller."""
    return PrincipalResponse.from_principal(principal)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout() -> Response:
    """Clear the session cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    _clear_session_cookie(response)
    return response
