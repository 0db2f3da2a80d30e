"""The identity gate guards every learning-data operation."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from langbuddy.core.identity import require_user
from langbuddy.db.models import User
from langbuddy.utils.exceptions import UnauthorizedError

GUARDED_CALLS = [
    ("post", "/api/v1/profiles", {"target_language": "es"}),
    ("patch", "/api/v1/profiles/some-id", {"goals": "travel"}),
    ("get", "/api/v1/profiles", None),
    ("put", "/api/v1/vocabulary", {"language_profile_id": "p", "term": "hola"}),
    ("delete", "/api/v1/vocabulary/some-id", None),
    ("get", "/api/v1/vocabulary?language_profile_id=p", None),
    ("post", "/api/v1/practice-sessions", {"language_profile_id": "p"}),
    ("post", "/api/v1/practice-sessions/some-id/complete", {}),
    ("get", "/api/v1/practice-sessions?language_profile_id=p", None),
    ("get", "/api/v1/users/me", None),
]


def test_require_user_rejects_missing_identity() -> None:
    with pytest.raises(UnauthorizedError) as excinfo:
        require_user(None)

    assert excinfo.value.code == "UNAUTHORIZED"
    assert excinfo.value.message == "You must be signed in to perform this action."


def test_require_user_returns_identity() -> None:
    user = User(id="user-1", email="a@example.com", hashed_password="x")

    assert require_user(user) is user


@pytest.mark.parametrize(("method", "url", "body"), GUARDED_CALLS)
def test_operations_reject_anonymous_calls(client: TestClient, method, url, body) -> None:
    kwargs = {"json": body} if body is not None else {}
    response = client.request(method.upper(), url, **kwargs)

    assert response.status_code == 401
    payload = response.json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "UNAUTHORIZED"
    assert response.headers["www-authenticate"] == "Bearer"


def test_garbage_token_is_treated_as_anonymous(client: TestClient) -> None:
    response = client.get(
        "/api/v1/profiles", headers={"Authorization": "Bearer not-a-real-token"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"
