"""HTTP client for the OAuth2 identity provider (authorization-code flow)."""

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from cinetheque.config import Settings
from cinetheque.domain.identity.principal import Principal
from cinetheque.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


class OAuthClient:
    """Talks to the identity provider's token and userinfo endpoints.

    ``transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.settings = settings
        self.transport = transport
        self.timeout = timeout

    def authorization_url(self, state: str) -> str:
        """URL of the provider's consent page for this login attempt."""
        params = {
            "response_type": "code",
            "client_id": self.settings.OAUTH_CLIENT_ID,
            "redirect_uri": self.settings.OAUTH_REDIRECT_URI,
            "scope": " ".join(self.settings.OAUTH_SCOPES),
            "state": state,
        }
        return f"{self.settings.OAUTH_AUTHORIZATION_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for an access token.

        Raises:
            UnauthorizedError: With the provider's error code when it refuses
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.settings.OAUTH_REDIRECT_URI,
            "client_id": self.settings.OAUTH_CLIENT_ID,
            "client_secret": self.settings.OAUTH_CLIENT_SECRET,
        }
        response = await self._request(
            "POST", self.settings.OAUTH_TOKEN_URL, data=data, headers={"Accept": "application/json"}
        )
        payload = self._json(response)

        access_token = payload.get("access_token")
        if response.status_code != httpx.codes.OK or not access_token:
            error_code = str(payload.get("error") or "invalid_grant")
            logger.warning(f"Token exchange refused: {error_code} (status={response.status_code})")
            raise UnauthorizedError(error_code, "The authorization code could not be exchanged.")
        return str(access_token)

    async def fetch_user_info(self, access_token: str) -> Principal:
        """
        Read the caller's identity from the userinfo endpoint.

        Raises:
            UnauthorizedError: If the provider rejects the access token
        """
        response = await self._request(
            "GET",
            self.settings.OAUTH_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}", "Accept": "application/json"},
        )
        claims = self._json(response)

        if response.status_code != httpx.codes.OK or not claims.get("sub"):
            error_code = str(claims.get("error") or "invalid_token")
            logger.warning(f"Userinfo request refused: {error_code} (status={response.status_code})")
            raise UnauthorizedError(error_code, "The identity provider did not return a user.")

        return Principal(
            subject=str(claims["sub"]),
            name=claims.get("name") or claims.get("preferred_username"),
            email=claims.get("email"),
            authorities=self._authorities(claims),
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                return await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Identity provider unreachable at {url}: {e!s}")
            raise UnauthorizedError(
                "temporarily_unavailable", "The identity provider is unavailable."
            ) from e

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    def _authorities(self, claims: dict[str, Any]) -> frozenset[str]:
        raw = claims.get(self.settings.OAUTH_AUTHORITIES_CLAIM) or []
        if isinstance(raw, str):
            raw = raw.split()
        return frozenset(str(authority) for authority in raw)
