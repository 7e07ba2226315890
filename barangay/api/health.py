"""Health check endpoints for container probes."""

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
from django.db import DatabaseError, connection
from barangay.models import IdentifierSequence
import logging

logger = logging.getLogger(__name__)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint for liveness probes.

    Returns:
        200 OK: Service is healthy
        503 Service Unavailable: Service has issues
    """
    health_status = {"status": "healthy", "checks": {}}

    # Check database connection
    try:
        connection.ensure_connection()
        health_status["checks"]["database"] = "ok"
    except DatabaseError as e:
        logger.error(f"Database health check failed: {str(e)}")
        health_status["checks"]["database"] = "error"
        health_status["status"] = "unhealthy"

    if health_status["status"] == "healthy":
        return Response(health_status, status=status.HTTP_200_OK)
    else:
        return Response(health_status, status=status.HTTP_503_SERVICE_UNAVAILABLE)


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def readiness_check(request):
    """
    Readiness check for the readiness probe.

    Ready once the identifier counters table is queryable.

    Returns:
        200 OK: Service is ready
        503 Service Unavailable: Identifier store unreachable or not migrated
    """
    try:
        IdentifierSequence.objects.exists()
    except DatabaseError as e:
        logger.error(f"Readiness check failed: {str(e)}")
        return Response(
            {"status": "not ready", "checks": {"identifier_sequences": "error"}},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return Response(
        {"status": "ready", "checks": {"identifier_sequences": "ok"}}, status=status.HTTP_200_OK
    )
