import pytest
from rest_framework.test import APIClient

from core.tokens import TokenIdentity, get_token_service
from users.credentials import CredentialStore


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def account(db):
    return CredentialStore().register("coach@proclubs.test", "s3cret-pass")


@pytest.fixture
def token(account):
    return get_token_service().issue(TokenIdentity(email=account.email, user_id=str(account.pk)))


@pytest.fixture
def auth_client(token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client
