from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from clubs.models import Club
from core.tokens import TokenIdentity, get_token_service

pytestmark = pytest.mark.django_db


def test_club_lifecycle(auth_client, api_client):
    response = auth_client.post("/api/clubs", {"name": "Red FC"}, format="json")
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Red FC"
    assert created["id"]

    listed = api_client.get("/api/clubs").json()
    assert [c["id"] for c in listed] == [created["id"]]

    response = auth_client.delete(f"/api/clubs/{created['id']}")
    assert response.status_code == 204

    assert api_client.get("/api/clubs").json() == []


def test_create_requires_name(auth_client):
    response = auth_client.post("/api/clubs", {"description": "no name"}, format="json")
    assert response.status_code == 400
    assert "name" in response.json()["fields"]


def test_create_rejects_nested_stats(auth_client):
    response = auth_client.post("/api/clubs", {"name": "Blue FC", "stats": {"form": ["W", "L"]}}, format="json")
    assert response.status_code == 400
    assert "form" in response.json()["fields"]["stats"][0]
    assert not Club.objects.exists()


def test_create_accepts_scalar_stats(auth_client):
    stats = {"wins": 10, "rating": 7.5, "division": "D1", "promoted": True, "coach": None}
    response = auth_client.post("/api/clubs", {"name": "Blue FC", "stats": stats}, format="json")
    assert response.status_code == 201
    assert response.json()["stats"] == stats


def test_update_changes_only_supplied_fields(auth_client):
    club = Club.objects.create(name="Green FC", logo="https://img.test/g.png", description="old", stats={"wins": 1})

    response = auth_client.put(f"/api/clubs/{club.pk}", {"description": "new"}, format="json")

    assert response.status_code == 200
    body = response.json()
    assert body["description"] == "new"
    assert body["name"] == "Green FC"
    assert body["logo"] == "https://img.test/g.png"
    assert body["stats"] == {"wins": 1}


def test_update_missing_club_is_404(auth_client):
    response = auth_client.put("/api/clubs/2f1d0b7e-1d3c-4a55-9d1e-3a1c9a0f0000", {"name": "x"}, format="json")
    assert response.status_code == 404
    assert response.json() == {"error": "Club not found."}


def test_update_malformed_id_is_404(auth_client):
    response = auth_client.patch("/api/clubs/not-a-uuid", {"name": "x"}, format="json")
    assert response.status_code == 404


def test_delete_is_idempotent(auth_client):
    club = Club.objects.create(name="Gone FC")
    assert auth_client.delete(f"/api/clubs/{club.pk}").status_code == 204
    assert auth_client.delete(f"/api/clubs/{club.pk}").status_code == 204
    assert auth_client.delete("/api/clubs/not-a-uuid").status_code == 204


def test_retrieve_one_club(api_client):
    club = Club.objects.create(name="Solo FC")
    response = api_client.get(f"/api/clubs/{club.pk}/")
    assert response.status_code == 200
    assert response.json()["name"] == "Solo FC"


def test_write_without_token_is_401(api_client):
    response = api_client.post("/api/clubs", {"name": "Red FC"}, format="json")
    assert response.status_code == 401
    assert response["WWW-Authenticate"].startswith("Bearer")
    assert not Club.objects.exists()


def test_bearer_without_token_is_401(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer")
    assert api_client.post("/api/clubs", {"name": "Red FC"}, format="json").status_code == 401


def test_write_with_garbled_token_is_403(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
    response = api_client.post("/api/clubs", {"name": "Red FC"}, format="json")
    assert response.status_code == 403
    assert "error" in response.json()


def test_write_with_expired_token_is_403(account):
    raw = get_token_service().issue(
        TokenIdentity(email=account.email, user_id=str(account.pk)),
        issued_at=timezone.now() - timedelta(hours=25),
    )
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {raw}")
    club = Club.objects.create(name="Kept FC")

    assert client.delete(f"/api/clubs/{club.pk}").status_code == 403
    assert Club.objects.filter(pk=club.pk).exists()


def test_reads_ignore_bad_token(api_client):
    Club.objects.create(name="Open FC")
    api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
    response = api_client.get("/api/clubs")
    assert response.status_code == 200
    assert len(response.json()) == 1


def test_write_with_other_scheme_is_401(api_client):
    api_client.credentials(HTTP_AUTHORIZATION="Basic Y29hY2g6cHc=")
    assert api_client.post("/api/clubs", {"name": "Red FC"}, format="json").status_code == 401
    assert not Club.objects.exists()


def test_malformed_body_is_not_parsed_before_authentication(api_client):
    response = api_client.post("/api/clubs", data="{not json", content_type="application/json")
    assert response.status_code == 401

    api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")
    response = api_client.post("/api/clubs", data="{not json", content_type="application/json")
    assert response.status_code == 403


def test_malformed_body_with_valid_token_is_400(auth_client):
    response = auth_client.post("/api/clubs", data="{not json", content_type="application/json")
    assert response.status_code == 400
