"""Tests for session token creation and verification."""

import jwt

from cinetheque.config import get_settings
from cinetheque.domain.identity.principal import Principal
from cinetheque.infrastructure.identity.auth.token_service import (
    ALGORITHM,
    create_session_token,
    verify_session_token,
)


def test_round_trip_keeps_claims() -> None:
    principal = Principal(
        subject="u-1",
        name="Agnès",
        email="agnes@example.com",
        authorities=frozenset({"admin", "editor"}),
    )

    verified = verify_session_token(create_session_token(principal))

    assert verified == principal
    assert verified.has_authority("editor")


def test_garbage_token_is_rejected() -> None:
    assert verify_session_token("definitely.not.a-token") is None


def test_token_of_other_type_is_rejected() -> None:
    token = jwt.encode({"sub": "u-1", "type": "refresh"}, get_settings().SECRET_KEY, ALGORITHM)

    assert verify_session_token(token) is None


def test_token_without_subject_is_rejected() -> None:
    token = jwt.encode({"type": "session"}, get_settings().SECRET_KEY, ALGORITHM)

    assert verify_session_token(token) is None
