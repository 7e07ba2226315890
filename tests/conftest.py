"""
Pytest configuration and shared fixtures for the test suite.
"""

import datetime
import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from barangay.models import DocumentRequest, Event, User
from barangay.services.resident_service import FamilyHeadService, ResidentService


@pytest.fixture
def current_year():
    return timezone.localdate().year


@pytest.fixture
def sample_resident_data():
    """Sample resident data as stored by the resident service."""
    return {
        "first_name": "Juan",
        "last_name": "Dela Cruz",
        "gender": "Male",
        "birth_date": datetime.date(1990, 5, 17),
        "address": "123 Rizal St., Purok 1",
        "contact_number": "09171234567",
    }


@pytest.fixture
def sample_family_head_data():
    return {
        "first_name": "Maria",
        "last_name": "Santos",
        "gender": "Female",
        "birth_date": datetime.date(1975, 2, 3),
        "address": "45 Mabini St., Purok 3",
        "contact_number": "09181112222",
    }


@pytest.fixture
def sample_event_data():
    return {
        "title": "Barangay Clean-up Drive",
        "description": "Community clean-up along the river bank",
        "category": "Community",
        "event_date": timezone.make_aware(datetime.datetime(2025, 6, 14, 7, 0)),
        "time": "7:00 AM",
        "location": "Barangay Hall",
    }


@pytest.fixture
def create_resident(db, sample_resident_data):
    """Factory fixture to create a resident with an allocated identifier."""

    def _create_resident(**kwargs):
        return ResidentService().create_resident({**sample_resident_data, **kwargs})

    return _create_resident


@pytest.fixture
def create_family_head(db, sample_family_head_data):
    """Factory fixture to create a family head with an allocated identifier."""

    def _create_family_head(**kwargs):
        return FamilyHeadService().create_family_head({**sample_family_head_data, **kwargs})

    return _create_family_head


@pytest.fixture
def create_event(db, sample_event_data):
    def _create_event(**kwargs):
        return Event.objects.create(**{**sample_event_data, **kwargs})

    return _create_event


@pytest.fixture
def create_document_request(db):
    """Factory fixture to create a document request for an existing resident."""
    counter = {"value": 0}

    def _create_document_request(resident, **kwargs):
        counter["value"] += 1
        data = {
            "request_id": f"REQ-TEST{counter['value']:03d}",
            "resident_id": resident.resident_id,
            "resident_name": resident.full_name,
            "document_type": "barangay-clearance",
            "purpose": "Employment",
            "delivery_option": "pickup",
            "status": DocumentRequest.STATUS_PENDING,
            **kwargs,
        }
        return DocumentRequest.objects.create(**data)

    return _create_document_request


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        username="admin",
        password="admin-pass",
        name="Barangay Admin",
        role=User.ROLE_ADMIN,
        is_staff=True,
    )


@pytest.fixture
def resident(create_resident):
    """A stored resident that owns the resident_user account."""
    return create_resident()


@pytest.fixture
def resident_user(resident):
    return User.objects.create_user(
        username="juan",
        password="juan-pass",
        name=resident.full_name,
        role=User.ROLE_RESIDENT,
        resident_id=resident.resident_id,
    )


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def resident_client(resident_user):
    client = APIClient()
    client.force_authenticate(user=resident_user)
    return client
