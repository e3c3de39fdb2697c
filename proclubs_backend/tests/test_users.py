import pytest

from core.tokens import get_token_service
from users.credentials import CredentialStore
from users.models import UserAccount

pytestmark = pytest.mark.django_db


def test_register_stores_a_hash_not_the_password():
    account = CredentialStore().register("a@b.test", "hunter22")
    assert account.password_hash != "hunter22"
    assert CredentialStore().verify_password("hunter22", account.password_hash)
    assert not CredentialStore().verify_password("hunter23", account.password_hash)


def test_find_by_email_missing_returns_none():
    assert CredentialStore().find_by_email("nobody@b.test") is None


def test_register_endpoint(api_client):
    response = api_client.post("/api/register", {"email": "new@b.test", "password": "pw-123456"}, format="json")
    assert response.status_code == 201
    assert response.json() == {"message": "User registered"}
    assert UserAccount.objects.filter(email="new@b.test").count() == 1


@pytest.mark.parametrize("payload", [{}, {"email": "x@b.test"}, {"password": "pw"}])
def test_register_requires_email_and_password(api_client, payload):
    response = api_client.post("/api/register", payload, format="json")
    assert response.status_code == 400
    assert "error" in response.json()


def test_register_only_checks_presence(api_client):
    response = api_client.post("/api/register", {"email": "short@b.test", "password": "1"}, format="json")
    assert response.status_code == 201


def test_duplicate_registration_creates_two_accounts(api_client):
    for _ in range(2):
        response = api_client.post("/api/register", {"email": "dup@b.test", "password": "pw-123456"}, format="json")
        assert response.status_code == 201
    assert UserAccount.objects.filter(email="dup@b.test").count() == 2

    response = api_client.post("/api/login", {"email": "dup@b.test", "password": "pw-123456"}, format="json")
    assert response.status_code == 200


def test_register_then_login_yields_verifiable_token(api_client):
    api_client.post("/api/register", {"email": "p@b.test", "password": "pw-123456"}, format="json")
    response = api_client.post("/api/login", {"email": "p@b.test", "password": "pw-123456"}, format="json")

    assert response.status_code == 200
    identity = get_token_service().verify(response.json()["token"])
    account = UserAccount.objects.get(email="p@b.test")
    assert identity.email == "p@b.test"
    assert identity.user_id == str(account.pk)


def test_login_with_wrong_password(api_client, account):
    response = api_client.post("/api/login", {"email": account.email, "password": "wrong"}, format="json")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid credentials"}


def test_login_with_unknown_email(api_client):
    response = api_client.post("/api/login", {"email": "ghost@b.test", "password": "x"}, format="json")
    assert response.status_code == 400
    assert "token" not in response.json()


def test_login_accepts_trailing_slash(api_client, account):
    response = api_client.post("/api/login/", {"email": account.email, "password": "s3cret-pass"}, format="json")
    assert response.status_code == 200
    assert response.json()["token"]
