"""Actor derivation from bearer tokens."""

from datetime import timedelta

import pytest
from jose import jwt

from timesheet.core.config import get_settings
from timesheet.infrastructure.security.jwt import (
    actor_from_token,
    create_access_token,
    verify_token,
)


def test_create_and_verify_round_trip() -> None:
    token = create_access_token({"sub": "17", "loginId": "alice"})
    payload = verify_token(token)
    assert payload["sub"] == "17"
    assert payload["loginId"] == "alice"
    assert "exp" in payload


def test_actor_prefers_login_claim() -> None:
    token = create_access_token({"login": "alice", "loginId": "a.smith", "sub": "17"})
    assert actor_from_token(token) == "alice"


def test_actor_falls_back_to_login_id_then_sub() -> None:
    assert actor_from_token(create_access_token({"loginId": "bob", "sub": "3"})) == "bob"
    assert actor_from_token(create_access_token({"sub": "carol"})) == "carol"


def test_actor_ignores_blank_claims() -> None:
    token = create_access_token({"login": "  ", "sub": "dave"})
    assert actor_from_token(token) == "dave"


def test_actor_none_when_no_identity_claim() -> None:
    assert actor_from_token(create_access_token({"role": "admin"})) is None


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"login": "alice"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError):
        verify_token(token)
    assert actor_from_token(token) is None


def test_token_signed_with_other_key_is_rejected() -> None:
    forged = jwt.encode({"login": "mallory", "exp": 4102444800}, "other-key", algorithm="HS256")
    assert actor_from_token(forged) is None


def test_token_without_exp_is_rejected() -> None:
    secret = get_settings().secret_key.get_secret_value()
    token = jwt.encode({"login": "alice"}, secret, algorithm="HS256")
    assert actor_from_token(token) is None


def test_garbage_token_is_rejected() -> None:
    assert actor_from_token("not-a-jwt") is None
