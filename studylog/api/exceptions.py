from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, ParseError
from rest_framework.response import Response
import structlog

from ..errors import InternalError, StorageError, StudyTrackerError

logger = structlog.get_logger()


def exception_handler(exc, context):
    """
    Render every failure as ``{"error": ..., "details"?: ...}``.

    Unknown exceptions become a generic 500; the traceback is logged and
    never sent to the client.
    """
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DatabaseError):
        logger.error("database_error", view=view_name, error=str(exc))
        exc = StorageError(details=str(exc))
    elif not isinstance(exc, (StudyTrackerError, APIException)):
        logger.exception("unhandled_error", view=view_name, exc_info=exc)
        exc = InternalError()

    if isinstance(exc, StudyTrackerError):
        return Response(exc.as_payload(), status=exc.status_code)

    if isinstance(exc, ParseError):
        return Response(
            {"error": "Invalid JSON in request body"}, status=status.HTTP_400_BAD_REQUEST
        )

    return Response({"error": str(exc.detail)}, status=exc.status_code)
