"""Tests for language profile creation, updates and listing."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from langbuddy.schemas import LanguageProfileCreate, LanguageProfileUpdate
from langbuddy.services.profiles import ProfileService
from langbuddy.utils.exceptions import NotFoundError


@pytest.fixture()
def profile_service(db_session, ids, clock) -> ProfileService:
    return ProfileService(db_session, id_factory=ids, clock=clock)


def create_profile(client: TestClient, headers: dict[str, str], **fields) -> dict:
    payload = {"target_language": "es", **fields}
    response = client.post("/api/v1/profiles", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]["profile"]


def test_create_profile_returns_active_record(profile_service, learner) -> None:
    profile = profile_service.create(
        learner.id,
        LanguageProfileCreate(target_language="es", native_language="en", goals="travel"),
    )

    assert profile.id == "id-0001"
    assert profile.user_id == learner.id
    assert profile.is_active is True
    assert profile.created_at == profile.updated_at
    assert profile.proficiency_level is None


def test_update_merges_supplied_fields(profile_service, learner) -> None:
    created = profile_service.create(
        learner.id,
        LanguageProfileCreate(
            target_language="es", native_language="en", proficiency_level="beginner", goals="travel"
        ),
    )
    created_at = created.created_at

    updated = profile_service.update(
        learner.id, created.id, LanguageProfileUpdate(proficiency_level="intermediate")
    )

    assert updated.proficiency_level == "intermediate"
    assert updated.target_language == "es"
    assert updated.native_language == "en"
    assert updated.goals == "travel"
    assert updated.is_active is True
    assert updated.created_at == created_at
    assert updated.updated_at > created_at


def test_update_with_explicit_null_keeps_stored_value(profile_service, learner) -> None:
    created = profile_service.create(
        learner.id, LanguageProfileCreate(target_language="de", goals="exam")
    )

    updated = profile_service.update(
        learner.id, created.id, LanguageProfileUpdate(goals=None, is_active=False)
    )

    assert updated.goals == "exam"
    assert updated.is_active is False


def test_update_unknown_profile_is_not_found(profile_service, learner) -> None:
    with pytest.raises(NotFoundError):
        profile_service.update(learner.id, "missing", LanguageProfileUpdate(goals="x"))


def test_update_foreign_profile_is_not_found(profile_service, learner, other_learner) -> None:
    created = profile_service.create(learner.id, LanguageProfileCreate(target_language="fr"))

    with pytest.raises(NotFoundError):
        profile_service.update(other_learner.id, created.id, LanguageProfileUpdate(goals="mine"))

    assert profile_service.list_profiles(learner.id)[0].goals is None


def test_list_hides_inactive_profiles_by_default(profile_service, learner, other_learner) -> None:
    active = profile_service.create(learner.id, LanguageProfileCreate(target_language="es"))
    retired = profile_service.create(learner.id, LanguageProfileCreate(target_language="it"))
    profile_service.create(other_learner.id, LanguageProfileCreate(target_language="ja"))
    profile_service.update(learner.id, retired.id, LanguageProfileUpdate(is_active=False))

    default_listing = profile_service.list_profiles(learner.id)
    full_listing = profile_service.list_profiles(learner.id, include_inactive=True)

    assert [profile.id for profile in default_listing] == [active.id]
    assert {profile.id for profile in full_listing} == {active.id, retired.id}


def test_create_profile_endpoint(client: TestClient, auth_headers) -> None:
    response = client.post(
        "/api/v1/profiles",
        json={"target_language": "es", "native_language": "en"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    profile = body["data"]["profile"]
    assert profile["target_language"] == "es"
    assert profile["is_active"] is True
    assert profile["created_at"] == profile["updated_at"]


def test_create_profile_requires_target_language(client: TestClient, auth_headers) -> None:
    response = client.post(
        "/api/v1/profiles", json={"target_language": ""}, headers=auth_headers
    )

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"]["errors"][0]["loc"] == ["body", "target_language"]


def test_update_profile_endpoint(client: TestClient, auth_headers) -> None:
    profile = create_profile(client, auth_headers, goals="travel")

    response = client.patch(
        f"/api/v1/profiles/{profile['id']}",
        json={"is_active": False},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()["data"]["profile"]
    assert updated["is_active"] is False
    assert updated["goals"] == "travel"
    assert updated["id"] == profile["id"]


def test_update_profile_of_another_user_is_not_found(
    client: TestClient, auth_headers, other_auth_headers
) -> None:
    profile = create_profile(client, auth_headers)

    response = client.patch(
        f"/api/v1/profiles/{profile['id']}",
        json={"goals": "hijack"},
        headers=other_auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "NOT_FOUND",
        "message": "Language profile not found.",
    }


def test_list_profiles_endpoint(client: TestClient, auth_headers, other_auth_headers) -> None:
    kept = create_profile(client, auth_headers, target_language="es")
    retired = create_profile(client, auth_headers, target_language="pt")
    create_profile(client, other_auth_headers, target_language="ko")
    client.patch(
        f"/api/v1/profiles/{retired['id']}", json={"is_active": False}, headers=auth_headers
    )

    response = client.get("/api/v1/profiles", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 1
    assert [item["id"] for item in data["items"]] == [kept["id"]]

    response = client.get(
        "/api/v1/profiles", params={"include_inactive": True}, headers=auth_headers
    )
    data = response.json()["data"]
    assert data["total"] == 2


def test_update_target_language_alone_keeps_other_fields(client: TestClient, auth_headers) -> None:
    profile = create_profile(client, auth_headers, native_language="en", goals="travel")

    response = client.patch(
        f"/api/v1/profiles/{profile['id']}",
        json={"target_language": "pt"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.json()["data"]["profile"]
    assert updated["target_language"] == "pt"
    assert updated["native_language"] == "en"
    assert updated["goals"] == "travel"
    assert updated["is_active"] is True


def test_update_rejects_empty_target_language(client: TestClient, auth_headers) -> None:
    profile = create_profile(client, auth_headers)

    response = client.patch(
        f"/api/v1/profiles/{profile['id']}",
        json={"target_language": ""},
        headers=auth_headers,
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    listing = client.get("/api/v1/profiles", headers=auth_headers).json()["data"]
    assert listing["items"][0]["target_language"] == "es"


def test_long_free_text_is_accepted(client: TestClient, auth_headers) -> None:
    target_language = "Scottish Gaelic (Gàidhlig), Western Isles dialect" + " variant"
    goals = "Read the whole of Sorley MacLean's poetry. " * 40

    profile = create_profile(
        client,
        auth_headers,
        target_language=target_language,
        proficiency_level="upper-intermediate, strong reading, weak listening",
        goals=goals,
    )

    assert len(target_language) > 50
    assert profile["target_language"] == target_language
    assert profile["goals"] == goals
