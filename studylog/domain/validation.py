import re
from datetime import datetime
from typing import NamedTuple, Optional
from urllib.parse import parse_qs, urlsplit

from ..config import MAX_MINUTES, MIN_MINUTES_EXCLUSIVE
from ..errors import AuthenticationError, ValidationError
from .enums import ErrorKind

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
BEARER_PREFIX = "Bearer "


class ValidationResult(NamedTuple):
    valid: bool
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None


def _fail(kind, message):
    return ValidationResult(False, message, kind)


def is_number(value) -> bool:
    # bool is an int subclass but never a valid quantity here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_date_string(value):
    """Return (kind, message) for a bad YYYY-MM-DD string, or None if valid."""
    if not isinstance(value, str) or not value:
        return ErrorKind.MISSING_DATE, "Date is required and must be a string"
    if not DATE_RE.fullmatch(value):
        return ErrorKind.INVALID_DATE_FORMAT, "Date must be in YYYY-MM-DD format"
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return ErrorKind.INVALID_DATE, "Invalid date"
    return None


def validate_study_log_body(body) -> ValidationResult:
    """
    Check a study log payload field by field: body, title, minutes, date.
    Stops at the first failure.
    """
    if body is None or not isinstance(body, dict):
        return _fail(ErrorKind.MISSING_BODY, "Request body is required")

    title = body.get("title")
    if not isinstance(title, str):
        return _fail(ErrorKind.INVALID_TITLE, "Title is required and must be a string")
    if title.strip() == "":
        return _fail(ErrorKind.INVALID_TITLE, "Title cannot be empty")

    minutes = body.get("minutes")
    if minutes is None:
        return _fail(ErrorKind.MISSING_MINUTES, "Minutes is required")
    if not is_number(minutes):
        return _fail(ErrorKind.INVALID_MINUTES_TYPE, "Minutes must be a number")
    if minutes <= MIN_MINUTES_EXCLUSIVE:
        return _fail(ErrorKind.MINUTES_OUT_OF_RANGE, "Minutes must be greater than 0")
    if minutes > MAX_MINUTES:
        return _fail(
            ErrorKind.MINUTES_OUT_OF_RANGE,
            f"Minutes cannot exceed {MAX_MINUTES} (24 hours)",
        )

    problem = check_date_string(body.get("date"))
    if problem:
        return _fail(*problem)

    return ValidationResult(True)


def extract_token_from_header(header) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    The scheme is case-sensitive and only the first prefix is stripped, so
    ``"Bearer Bearer xyz"`` yields ``"Bearer xyz"``.
    """
    if header is None:
        raise AuthenticationError(
            details="Authorization header is missing", kind=ErrorKind.MISSING_HEADER
        )
    if not header.startswith(BEARER_PREFIX):
        raise AuthenticationError(
            details='Authorization header must start with "Bearer "',
            kind=ErrorKind.INVALID_SCHEME,
        )
    token = header[len(BEARER_PREFIX):]
    if not token:
        raise AuthenticationError(details="Token is empty", kind=ErrorKind.EMPTY_TOKEN)
    return token


def extract_id_from_url(url) -> str:
    if not url:
        raise ValidationError(
            "ID is required", details="URL is required", kind=ErrorKind.MISSING_URL
        )
    try:
        parts = urlsplit(url)
    except ValueError:
        raise ValidationError(
            "ID is required", details="Invalid URL", kind=ErrorKind.INVALID_URL
        )
    # Absolute URLs only
    if not parts.scheme or not parts.netloc:
        raise ValidationError(
            "ID is required", details="Invalid URL", kind=ErrorKind.INVALID_URL
        )

    values = parse_qs(parts.query, keep_blank_values=True).get("id")
    if not values or not values[0].strip():
        raise ValidationError("ID is required", kind=ErrorKind.MISSING_ID)
    return values[0]
