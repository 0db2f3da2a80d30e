"""Tests for password hashing and bearer token decoding."""
from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from langbuddy.config import settings
from langbuddy.core.security import (
    ALGORITHM,
    InvalidTokenError,
    create_access_token,
    create_refresh_token,
    decode_access_token,
    hash_password,
    issue_token,
    verify_password,
)


def test_password_hash_round_trip() -> None:
    hashed = hash_password("verysecure")

    assert hashed != "verysecure"
    assert verify_password("verysecure", hashed)
    assert not verify_password("not-it", hashed)


def test_access_token_yields_user_id() -> None:
    token = create_access_token("user-42")

    assert decode_access_token(token) == "user-42"


def test_refresh_token_is_rejected() -> None:
    token = create_refresh_token("user-42")

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_expired_token_is_rejected() -> None:
    token = issue_token("user-42", "access", timedelta(seconds=-30))

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_token_signed_with_another_key_is_rejected() -> None:
    token = jwt.encode({"sub": "user-42", "type": "access"}, "other-key", algorithm=ALGORITHM)

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_token_without_subject_is_rejected() -> None:
    token = jwt.encode(
        {"type": "access", "exp": 4102444800}, settings.SECRET_KEY, algorithm=ALGORITHM
    )

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)
