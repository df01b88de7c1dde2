"""Tests for authentication: the security chain and the OAuth2 endpoints."""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from urllib.parse import parse_qs, urlparse

import httpx
import jwt
import pytest
from fastapi.testclient import TestClient
from starlette import status

from cinetheque.config import get_settings
from cinetheque.exceptions import UnauthorizedError
from cinetheque.infrastructure.identity.auth.oauth_client import OAuthClient
from cinetheque.infrastructure.identity.dependencies import get_oauth_client
from cinetheque.main import app

Handler = Callable[[httpx.Request], httpx.Response]


def identity_provider(
    token_status: int = 200,
    token_body: dict[str, object] | None = None,
    userinfo_body: dict[str, object] | None = None,
) -> Handler:
    """Build a fake identity provider answering the token and userinfo endpoints."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/token":
            return httpx.Response(
                token_status, json=token_body or {"access_token": "provider-access-token"}
            )
        if request.url.path == "/userinfo":
            assert request.headers["Authorization"] == "Bearer provider-access-token"
            return httpx.Response(
                200,
                json=userinfo_body
                or {
                    "sub": "idp-user-1",
                    "name": "Quentin",
                    "email": "qt@example.com",
                    "roles": ["admin"],
                },
            )
        return httpx.Response(404)

    return handler


def use_identity_provider(handler: Handler) -> None:
    transport = httpx.MockTransport(handler)
    app.dependency_overrides[get_oauth_client] = lambda: OAuthClient(
        get_settings(), transport=transport
    )


def start_login(client: TestClient) -> str:
    """Run GET /auth/login and return the state sent to the provider."""
    response = client.get("/auth/login", follow_redirects=False)
    assert response.status_code == status.HTTP_302_FOUND
    query = parse_qs(urlparse(response.headers["location"]).query)
    return query["state"][0]


class TestSecurityChain:
    """Tests for the application-wide authentication filter."""

    def test_home_is_public(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get("/home")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Welcome to Cinetheque API", "version": "0.1.0"}

    def test_missing_credentials(self, anonymous_client: TestClient) -> None:
        """Should answer 401 with the invalid_request error code."""
        response = anonymous_client.get("/directors")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["content-type"] == "application/problem+json"
        assert response.headers["WWW-Authenticate"] == 'Bearer error="invalid_request"'
        body = response.json()
        assert body["error"] == "invalid_request"
        assert body["type"].endswith("/unauthorized")

    def test_invalid_token(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get(
            "/movies", headers={"Authorization": "Bearer not-a-session-token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid_token"

    def test_expired_token(self, anonymous_client: TestClient) -> None:
        settings = get_settings()
        expired = jwt.encode(
            {
                "sub": "admin-1",
                "authorities": ["admin"],
                "type": "session",
                "exp": datetime.now(UTC) - timedelta(minutes=1),
            },
            settings.SECRET_KEY,
            algorithm="HS256",
        )

        response = anonymous_client.get("/studios", headers={"Authorization": f"Bearer {expired}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid_token"

    def test_token_signed_with_other_key(self, anonymous_client: TestClient) -> None:
        forged = jwt.encode(
            {"sub": "intruder", "authorities": ["admin"], "type": "session"},
            "some-other-secret-key-of-sufficient-length",
            algorithm="HS256",
        )

        response = anonymous_client.get("/studios", headers={"Authorization": f"Bearer {forged}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_session_cookie_is_accepted(
        self, anonymous_client: TestClient, viewer_token: str
    ) -> None:
        anonymous_client.cookies.set(get_settings().SESSION_COOKIE_NAME, viewer_token)

        response = anonymous_client.get("/directors")

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_reads_allowed_without_admin(self, viewer_client: TestClient) -> None:
        response = viewer_client.get("/movies")

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_delete_requires_admin(self, viewer_client: TestClient) -> None:
        """Should refuse deletes to authenticated callers lacking the admin authority."""
        response = viewer_client.delete("/movies/1")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["title"] == "Access forbidden"

    def test_unknown_route_is_not_found_before_auth(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get("/actors")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCurrentPrincipal:
    """Tests for GET /auth/me and POST /auth/logout."""

    def test_me(self, client: TestClient) -> None:
        response = client.get("/auth/me")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "subject": "admin-1",
            "name": "Ada Admin",
            "email": "ada@example.com",
            "authorities": ["admin"],
        }

    def test_me_requires_session(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get("/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_logout_clears_cookie(self, client: TestClient) -> None:
        response = client.post("/auth/logout")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert get_settings().SESSION_COOKIE_NAME in response.headers["set-cookie"]


class TestLogin:
    """Tests for GET /auth/login."""

    def test_login_redirects_to_provider(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get("/auth/login", follow_redirects=False)

        assert response.status_code == status.HTTP_302_FOUND
        location = urlparse(response.headers["location"])
        assert f"{location.scheme}://{location.netloc}{location.path}" == (
            "https://idp.example.com/authorize"
        )
        query = parse_qs(location.query)
        assert query["response_type"] == ["code"]
        assert query["client_id"] == ["cinetheque-test"]
        assert query["scope"] == ["openid profile email"]
        assert query["state"][0]
        assert "oauth_state" in response.headers["set-cookie"]

    def test_login_is_rate_limited(self, anonymous_client: TestClient) -> None:
        for _ in range(10):
            anonymous_client.get("/auth/login", follow_redirects=False)

        response = anonymous_client.get("/auth/login", follow_redirects=False)

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.json()["type"].endswith("/too-many-requests")


class TestCallback:
    """Tests for GET /auth/callback."""

    def test_callback_opens_session(self, anonymous_client: TestClient) -> None:
        """Should exchange the code, issue a session token and set the cookie."""
        use_identity_provider(identity_provider())
        state = start_login(anonymous_client)

        response = anonymous_client.get(
            "/auth/callback", params={"code": "auth-code", "state": state}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["expires_in"] == get_settings().SESSION_EXPIRE_MINUTES * 60

        me = anonymous_client.get(
            "/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"}
        )
        assert me.json()["subject"] == "idp-user-1"
        assert me.json()["authorities"] == ["admin"]

        # The session cookie alone authenticates the next calls
        assert anonymous_client.get("/directors").status_code == status.HTTP_204_NO_CONTENT

    def test_callback_space_separated_roles(self, anonymous_client: TestClient) -> None:
        use_identity_provider(
            identity_provider(userinfo_body={"sub": "idp-user-2", "roles": "admin editor"})
        )
        state = start_login(anonymous_client)

        response = anonymous_client.get(
            "/auth/callback", params={"code": "auth-code", "state": state}
        )

        token = response.json()["access_token"]
        me = anonymous_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["authorities"] == ["admin", "editor"]

    def test_callback_state_mismatch(self, anonymous_client: TestClient) -> None:
        use_identity_provider(identity_provider())
        start_login(anonymous_client)

        response = anonymous_client.get(
            "/auth/callback", params={"code": "auth-code", "state": "forged"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid_request"

    def test_callback_without_login(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get(
            "/auth/callback", params={"code": "auth-code", "state": "anything"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid_request"

    def test_callback_provider_error(self, anonymous_client: TestClient) -> None:
        """Should report the provider's error code."""
        response = anonymous_client.get("/auth/callback", params={"error": "access_denied"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "access_denied"

    def test_callback_code_rejected(self, anonymous_client: TestClient) -> None:
        use_identity_provider(
            identity_provider(token_status=400, token_body={"error": "invalid_grant"})
        )
        state = start_login(anonymous_client)

        response = anonymous_client.get(
            "/auth/callback", params={"code": "stale-code", "state": state}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid_grant"

    def test_callback_provider_unreachable(self, anonymous_client: TestClient) -> None:
        def unreachable(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        use_identity_provider(unreachable)
        state = start_login(anonymous_client)

        response = anonymous_client.get(
            "/auth/callback", params={"code": "auth-code", "state": state}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "temporarily_unavailable"




class TestOAuthClient:
    """Tests for the identity provider client on its own."""

    @pytest.fixture
    def provider_client(self) -> OAuthClient:
        return OAuthClient(get_settings(), transport=httpx.MockTransport(identity_provider()))

    def test_authorization_url_carries_redirect_uri(self, provider_client: OAuthClient) -> None:
        url = provider_client.authorization_url("xyz")

        query = parse_qs(urlparse(url).query)
        assert query["redirect_uri"] == [get_settings().OAUTH_REDIRECT_URI]
        assert query["state"] == ["xyz"]

    def test_exchange_code(self, provider_client: OAuthClient) -> None:
        access_token = asyncio.run(provider_client.exchange_code("auth-code"))

        assert access_token == "provider-access-token"

    def test_exchange_code_without_access_token(self) -> None:
        client = OAuthClient(
            get_settings(),
            transport=httpx.MockTransport(identity_provider(token_body={"token_type": "bearer"})),
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            asyncio.run(client.exchange_code("auth-code"))

        assert exc_info.value.error_code == "invalid_grant"

    def test_fetch_user_info_without_subject(self) -> None:
        client = OAuthClient(
            get_settings(),
            transport=httpx.MockTransport(identity_provider(userinfo_body={"name": "Nobody"})),
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            asyncio.run(client.fetch_user_info("provider-access-token"))

        assert exc_info.value.error_code == "invalid_token"

    def test_fetch_user_info_without_roles(self) -> None:
        client = OAuthClient(
            get_settings(),
            transport=httpx.MockTransport(identity_provider(userinfo_body={"sub": "u-9"})),
        )

        principal = asyncio.run(client.fetch_user_info("provider-access-token"))

        assert principal.subject == "u-9"
        assert principal.authorities == frozenset()
        assert principal.name is None
