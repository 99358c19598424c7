import pytest

from accounts.identity import (
    IdentityError,
    Principal,
    StaticTokenIdentityResolver,
    SupabaseIdentityResolver,
)
from accounts.middleware import BearerTokenAuthMiddleware
from studylog.errors import AuthenticationError


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        return self.response


def test_supabase_resolver_returns_principal():
    resolver = SupabaseIdentityResolver("https://auth.example.test/", "anon", 3)
    resolver.session = FakeSession(FakeResponse(200, {"id": "abc", "email": "a@example.test"}))

    principal = resolver.resolve("tok")

    assert principal == Principal(id="abc", email="a@example.test")
    url, headers, timeout = resolver.session.calls[0]
    assert url == "https://auth.example.test/auth/v1/user"
    assert headers["Authorization"] == "Bearer tok"
    assert headers["apikey"] == "anon"
    assert timeout == 3


def test_supabase_resolver_reports_provider_message():
    resolver = SupabaseIdentityResolver("https://auth.example.test", "anon", 3)
    resolver.session = FakeSession(FakeResponse(401, {"msg": "invalid JWT: token is expired"}))

    with pytest.raises(IdentityError, match="token is expired"):
        resolver.resolve("tok")


def test_supabase_resolver_handles_non_json_error():
    resolver = SupabaseIdentityResolver("https://auth.example.test", "anon", 3)
    resolver.session = FakeSession(FakeResponse(502, ValueError("not json")))

    with pytest.raises(IdentityError, match="502"):
        resolver.resolve("tok")


def test_supabase_resolver_requires_url(settings):
    settings.SUPABASE_URL = ""
    resolver = SupabaseIdentityResolver()

    with pytest.raises(IdentityError, match="not configured"):
        resolver.resolve("tok")


def test_static_resolver_rejects_unknown_token():
    resolver = StaticTokenIdentityResolver({"t1": "u1"})

    assert resolver.resolve("t1") == Principal(id="u1")
    with pytest.raises(IdentityError):
        resolver.resolve("t2")


def test_middleware_uses_injected_resolver(rf):
    class NoPrincipal:
        def resolve(self, token):
            return None

    seen = {}

    def get_response(request):
        seen["request"] = request
        return "ok"

    middleware = BearerTokenAuthMiddleware(get_response, resolver=NoPrincipal())
    request = rf.get("/api/me", HTTP_AUTHORIZATION="Bearer abc")
    assert middleware(request) == "ok"

    with pytest.raises(AuthenticationError) as exc_info:
        seen["request"].principal.id
    assert exc_info.value.status_code == 401


def test_middleware_skips_non_api_paths(rf):
    middleware = BearerTokenAuthMiddleware(lambda request: request, resolver=StaticTokenIdentityResolver({}))

    request = middleware(rf.get("/health"))

    assert not hasattr(request, "principal")
