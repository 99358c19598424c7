from rest_framework import status
from rest_framework.exceptions import APIException


class StudyTrackerError(APIException):
    """
    Base for every failure the API reports on purpose.

    `error` is the human string clients show, `details` the lower-level
    message (optional) and `kind` a stable reason code for logs and tests.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error = "Internal server error"

    def __init__(self, error=None, details=None, kind=None):
        self.error = error or self.default_error
        self.details = details
        self.kind = kind
        super().__init__(detail=self.error)

    def as_payload(self):
        payload = {"error": self.error}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(StudyTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_error = "Invalid input"


class AuthenticationError(StudyTrackerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_error = "Unauthorized"


class NotFoundError(StudyTrackerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_error = "Not found"


class StorageError(StudyTrackerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error = "Database error"


class InternalError(StudyTrackerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error = "Internal server error"
