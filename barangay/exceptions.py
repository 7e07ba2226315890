"""
Error taxonomy shared by services and API views.

Every class is a DRF APIException so views can let them propagate and the
API exception handler renders them as {"error": ..., "code": ...}.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class BarangayError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request could not be processed"
    default_code = "error"


class MalformedInput(BarangayError):
    default_detail = "Invalid QR code format"
    default_code = "malformed_input"


class MissingType(BarangayError):
    default_detail = "Invalid QR code format: missing type"
    default_code = "missing_type"


class UnknownType(BarangayError):
    default_detail = "Unknown QR code type"
    default_code = "unknown_type"


class NotEligible(BarangayError):
    default_detail = "QR code is only available for approved or completed document requests"
    default_code = "not_eligible"


class InvalidTransition(BarangayError):
    default_detail = "Invalid status transition"
    default_code = "invalid_transition"


class NotFound(BarangayError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class Unauthorized(BarangayError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized to perform this action"
    default_code = "unauthorized"


class StoreFailure(BarangayError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Server error"
    default_code = "store_failure"
