"""
URL configuration for the barangay management portal.
"""

from django.contrib import admin
from django.urls import path, include
from barangay.api.health import health_check, readiness_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("barangay.api.urls")),
    path("api/health/", health_check, name="health_check"),
    path("api/ready/", readiness_check, name="readiness_check"),
]
