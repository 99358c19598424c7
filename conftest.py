import pytest
from rest_framework.test import APIClient

TOKENS = {
    "token-alice": "11111111-1111-1111-1111-111111111111",
    "token-bob": "22222222-2222-2222-2222-222222222222",
}


@pytest.fixture(autouse=True)
def static_identity(settings):
    """Resolve bearer tokens from a fixed table instead of the remote provider."""
    settings.STUDYTRACKER_IDENTITY_RESOLVER = "accounts.identity.StaticTokenIdentityResolver"
    settings.STUDYTRACKER_STATIC_TOKENS = dict(TOKENS)
    settings.STUDYTRACKER_LANGUAGE = "en"
    return TOKENS


@pytest.fixture
def alice_id():
    return TOKENS["token-alice"]


@pytest.fixture
def bob_id():
    return TOKENS["token-bob"]


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def alice_client():
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION="Bearer token-alice")
    return client


@pytest.fixture
def bob_client():
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION="Bearer token-bob")
    return client
