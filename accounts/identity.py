from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.utils.module_loading import import_string
import requests
import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class Principal:
    id: str
    email: Optional[str] = None


class IdentityError(Exception):
    """The resolver rejected the token or could not be reached."""


class SupabaseIdentityResolver:
    """
    Resolve access tokens against a Supabase (GoTrue) auth server:
    ``GET {url}/auth/v1/user`` with the token as bearer credential.
    """

    def __init__(self, base_url=None, api_key=None, timeout=None):
        self.base_url = (base_url or settings.SUPABASE_URL or "").rstrip("/")
        self.api_key = api_key or settings.SUPABASE_ANON_KEY
        self.timeout = timeout or settings.SUPABASE_AUTH_TIMEOUT
        self.session = requests.Session()

    def resolve(self, token):
        if not self.base_url:
            raise IdentityError("Identity provider is not configured")
        try:
            r = self.session.get(
                f"{self.base_url}/auth/v1/user",
                headers={"Authorization": f"Bearer {token}", "apikey": self.api_key or ""},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("identity_provider_unreachable", error=str(e))
            raise IdentityError("Identity provider unreachable") from e

        if r.status_code != 200:
            raise IdentityError(_error_message(r))

        data = r.json()
        if not data.get("id"):
            raise IdentityError("User not found")
        return Principal(id=str(data["id"]), email=data.get("email"))


def _error_message(response):
    try:
        body = response.json()
    except ValueError:
        return f"Auth server responded {response.status_code}"
    return (
        body.get("msg")
        or body.get("error_description")
        or body.get("message")
        or f"Auth server responded {response.status_code}"
    )


class StaticTokenIdentityResolver:
    """Token -> user id table from settings, for local development and tests."""

    def __init__(self, tokens=None):
        self.tokens = dict(tokens if tokens is not None else settings.STUDYTRACKER_STATIC_TOKENS)

    def resolve(self, token):
        user_id = self.tokens.get(token)
        if not user_id:
            raise IdentityError("Invalid JWT")
        return Principal(id=str(user_id))


def load_identity_resolver():
    return import_string(settings.STUDYTRACKER_IDENTITY_RESOLVER)()
