from django.utils.functional import SimpleLazyObject

from studylog.domain.validation import extract_token_from_header
from studylog.errors import AuthenticationError
from studylog.domain.enums import ErrorKind

from accounts.identity import IdentityError, load_identity_resolver

import structlog

logger = structlog.get_logger()


class BearerTokenAuthMiddleware:
    """
    Attach ``request.principal`` to every /api request.

    Resolution is lazy, like Django's ``request.user``: the identity provider
    is only called when a view first touches the principal, so handlers can
    reject a bad payload before authenticating. A failed resolution raises
    AuthenticationError, which the API exception handler turns into a 401.
    """

    def __init__(self, get_response, resolver=None):
        self.get_response = get_response
        self.resolver = resolver or load_identity_resolver()

    def __call__(self, request):
        if request.path.startswith("/api"):
            request.principal = SimpleLazyObject(lambda: self.authenticate(request))
        return self.get_response(request)

    def authenticate(self, request):
        try:
            token = extract_token_from_header(request.headers.get("Authorization"))
        except AuthenticationError as e:
            logger.info("auth_header_rejected", path=request.path, reason=e.details, kind=e.kind)
            # Header-shape details stay in the log
            raise AuthenticationError(kind=e.kind)

        try:
            principal = self.resolver.resolve(token)
        except IdentityError as e:
            logger.info("auth_token_rejected", path=request.path, reason=str(e))
            raise AuthenticationError(details=str(e), kind=ErrorKind.INVALID_CREDENTIALS)

        if principal is None:
            raise AuthenticationError(details="User not found", kind=ErrorKind.INVALID_CREDENTIALS)
        return principal
