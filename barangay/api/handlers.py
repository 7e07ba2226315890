import logging
from django.db import DatabaseError
from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler
from barangay.exceptions import StoreFailure

logger = logging.getLogger(__name__)


def flatten_messages(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            yield from flatten_messages(value)
    elif isinstance(detail, list):
        for value in detail:
            yield from flatten_messages(value)
    else:
        yield str(detail)


def api_exception_handler(exc, context):
    """
    Render API errors as {"error": message, "code": code}.

    Database errors are logged with their traceback and reported to the
    caller only as a generic server error.
    """
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            f"Store failure in {view.__class__.__name__ if view else 'unknown view'}: {str(exc)}",
            exc_info=exc,
        )
        exc = StoreFailure()

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {
            "error": ", ".join(flatten_messages(exc.detail)),
            "errors": response.data,
        }
        return response

    detail = getattr(exc, "detail", None)
    response.data = {
        "error": str(detail) if detail is not None else "Server error",
        "code": getattr(detail, "code", None) or getattr(exc, "default_code", "error"),
    }
    return response
