"""
API endpoint tests for the barangay portal.
"""

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from barangay.models import (
    Announcement,
    DocumentRequest,
    Event,
    FamilyHead,
    IdentifierSequence,
    Resident,
)
from barangay.services import verification
from barangay.services.qr import serialize_payload

DATA_URL_PREFIX = "data:image/png;base64,"


@pytest.mark.django_db
class TestResidentAPI:
    """Test cases for resident endpoints."""

    def test_create_resident(self, admin_client, current_year):
        data = {
            "firstName": "Ana",
            "lastName": "Reyes",
            "gender": "Female",
            "birthDate": "1998-11-02",
            "address": "7 Bonifacio St., Purok 2",
            "contactNumber": "09170000001",
        }

        response = admin_client.post(reverse("resident-list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["residentId"] == f"R-{current_year}001"
        assert response.data["type"] == "Resident"
        assert "verificationCode" not in response.data
        assert Resident.objects.filter(resident_id=response.data["residentId"]).exists()

    def test_create_resident_missing_fields(self, admin_client):
        response = admin_client.post(
            reverse("resident-list"), {"firstName": "Ana"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.data
        assert "lastName" in response.data["errors"]

    def test_list_requires_admin(self, resident_client):
        response = resident_client.get(reverse("resident-list"))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["error"] == "Admin access required"

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse("resident-list"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_resident_reads_own_record(self, resident_client, resident):
        url = reverse("resident-detail", kwargs={"resident_id": resident.resident_id})

        response = resident_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["residentId"] == resident.resident_id

    def test_resident_cannot_read_others(self, resident_client, create_resident):
        other = create_resident(first_name="Pedro")
        url = reverse("resident-detail", kwargs={"resident_id": other.resident_id})

        response = resident_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["code"] == "unauthorized"

    def test_resident_not_found(self, admin_client):
        url = reverse("resident-detail", kwargs={"resident_id": "R-1999999"})

        response = admin_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error"] == "Resident not found"

    def test_delete_requires_admin(self, resident_client, resident):
        url = reverse("resident-detail", kwargs={"resident_id": resident.resident_id})

        response = resident_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Resident.objects.filter(pk=resident.pk).exists()

    def test_resident_qr_code(self, resident_client, resident):
        url = reverse("resident-qrcode", kwargs={"resident_id": resident.resident_id})

        first = resident_client.get(url)
        second = resident_client.get(url)

        assert first.status_code == status.HTTP_200_OK
        assert first.data["qrCode"].startswith(DATA_URL_PREFIX)
        assert first.data["qrCode"] == second.data["qrCode"]


@pytest.mark.django_db
class TestFamilyHeadAPI:
    """Test cases for family head endpoints."""

    def test_create_family_head(self, admin_client, current_year):
        data = {
            "firstName": "Maria",
            "lastName": "Santos",
            "gender": "Female",
            "birthDate": "1975-02-03",
            "address": "45 Mabini St., Purok 3",
            "contactNumber": "09181112222",
        }

        response = admin_client.post(reverse("family-head-list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["headId"] == f"F-{current_year}001"
        assert response.data["type"] == "Family Head"

    def test_contact_number_required(self, admin_client):
        data = {
            "firstName": "Maria",
            "lastName": "Santos",
            "gender": "Female",
            "birthDate": "1975-02-03",
            "address": "45 Mabini St., Purok 3",
        }

        response = admin_client.post(reverse("family-head-list"), data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "contactNumber" in response.data["errors"]

    def test_members(self, admin_client, create_family_head, create_resident):
        family_head = create_family_head()
        member = create_resident(family_head_id=family_head.head_id)

        response = admin_client.get(
            reverse("family-head-members", kwargs={"head_id": family_head.head_id})
        )

        assert response.status_code == status.HTTP_200_OK
        assert [m["residentId"] for m in response.data] == [member.resident_id]

    def test_delete_with_members(self, admin_client, create_family_head, create_resident):
        family_head = create_family_head()
        create_resident(family_head_id=family_head.head_id)

        response = admin_client.delete(
            reverse("family-head-detail", kwargs={"head_id": family_head.head_id})
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert FamilyHead.objects.filter(pk=family_head.pk).exists()

    def test_qr_code_admin_only(self, admin_client, resident_client, create_family_head):
        family_head = create_family_head()
        url = reverse("family-head-qrcode", kwargs={"head_id": family_head.head_id})

        denied = resident_client.get(url)
        allowed = admin_client.get(url)

        assert denied.status_code == status.HTTP_403_FORBIDDEN
        assert allowed.status_code == status.HTTP_200_OK
        assert allowed.data["qrCode"].startswith(DATA_URL_PREFIX)


@pytest.mark.django_db
class TestEventAPI:
    """Test cases for event endpoints."""

    def test_residents_can_list_events(self, resident_client, create_event):
        create_event()

        response = resident_client.get(reverse("event-list"))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]["attendees"] == []

    def test_residents_cannot_create_events(self, resident_client):
        data = {
            "title": "Basketball League",
            "description": "Opening games",
            "category": "Sports",
            "eventDate": "2025-07-01T16:00:00+08:00",
            "time": "4:00 PM",
            "location": "Covered Court",
        }

        response = resident_client.post(reverse("event-list"), data, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Event.objects.exists()

    def test_update_keeps_time_when_omitted(self, admin_client, create_event):
        event = create_event()
        data = {
            "title": "River Clean-up",
            "description": event.description,
            "category": event.category,
            "eventDate": event.event_date.isoformat(),
            "location": event.location,
        }

        response = admin_client.put(
            reverse("event-detail", kwargs={"event_id": event.pk}), data, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["title"] == "River Clean-up"
        assert response.data["time"] == "7:00 AM"

    def test_register_and_unregister(self, resident_client, resident, create_event):
        event = create_event()
        attendee = {
            "attendee": {
                "id": resident.resident_id,
                "name": resident.full_name,
                "contactNumber": resident.contact_number,
            }
        }

        registered = resident_client.post(
            reverse("event-register", kwargs={"event_id": event.pk}), attendee, format="json"
        )
        duplicate = resident_client.post(
            reverse("event-register", kwargs={"event_id": event.pk}), attendee, format="json"
        )
        unregistered = resident_client.delete(
            reverse(
                "event-unregister",
                kwargs={"event_id": event.pk, "attendee_id": resident.resident_id},
            )
        )

        assert registered.status_code == status.HTTP_200_OK
        assert registered.data["message"] == "Registration successful"
        assert registered.data["attendees"][0]["id"] == resident.resident_id
        assert duplicate.status_code == status.HTTP_400_BAD_REQUEST
        assert unregistered.status_code == status.HTTP_200_OK
        assert unregistered.data["attendees"] == []

    def test_register_requires_attendee(self, resident_client, create_event):
        event = create_event()

        response = resident_client.post(
            reverse("event-register", kwargs={"event_id": event.pk}), {}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_event_not_found(self, admin_client):
        response = admin_client.get(reverse("event-detail", kwargs={"event_id": 9999}))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["error"] == "Event not found"

    def test_event_qr_code_is_stable(self, resident_client, create_event):
        event = create_event()
        url = reverse("event-qrcode", kwargs={"event_id": event.pk})

        first = resident_client.get(url)
        second = resident_client.get(url)

        assert first.status_code == status.HTTP_200_OK
        assert first.data["qrCode"].startswith(DATA_URL_PREFIX)
        assert first.data["qrCode"] == second.data["qrCode"]
        event.refresh_from_db()
        assert event.verification_code == first.data["qrCode"]


@pytest.mark.django_db
class TestDocumentRequestAPI:
    """Test cases for document request endpoints."""

    def test_resident_files_request(self, resident_client, resident, current_year):
        data = {
            "residentId": resident.resident_id,
            "documentType": "barangay-clearance",
            "purpose": "Employment",
            "deliveryOption": "pickup",
        }

        response = resident_client.post(reverse("document-list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["requestId"] == f"REQ-{current_year}001"
        assert response.data["status"] == "pending"
        assert response.data["residentName"] == resident.full_name

    def test_status_forced_to_pending(self, resident_client, resident):
        data = {
            "residentId": resident.resident_id,
            "documentType": "indigency",
            "purpose": "Medical assistance",
            "deliveryOption": "pickup",
            "status": "approved",
        }

        response = resident_client.post(reverse("document-list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["status"] == "pending"

    def test_resident_cannot_file_for_others(self, resident_client, create_resident):
        other = create_resident(first_name="Pedro")
        data = {
            "residentId": other.resident_id,
            "documentType": "residency",
            "purpose": "School",
            "deliveryOption": "pickup",
        }

        response = resident_client.post(reverse("document-list"), data, format="json")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_status_update_requires_admin(self, resident_client, resident, create_document_request):
        document_request = create_document_request(resident)

        response = resident_client.put(
            reverse("document-status", kwargs={"request_pk": document_request.pk}),
            {"status": "approved"},
            format="json",
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_approve_then_qr_code(
        self, admin_client, resident_client, resident, create_document_request
    ):
        document_request = create_document_request(resident)
        qr_url = reverse("document-qrcode", kwargs={"request_pk": document_request.pk})

        before = resident_client.get(qr_url)
        approved = admin_client.put(
            reverse("document-status", kwargs={"request_pk": document_request.pk}),
            {"status": "approved", "processingNotes": "Ready for pickup"},
            format="json",
        )
        after = resident_client.get(qr_url)

        assert before.status_code == status.HTTP_400_BAD_REQUEST
        assert before.data["code"] == "not_eligible"
        assert approved.status_code == status.HTTP_200_OK
        assert approved.data["status"] == "approved"
        assert approved.data["processedBy"] == "admin"
        assert after.status_code == status.HTTP_200_OK
        assert after.data["qrCode"].startswith(DATA_URL_PREFIX)

    def test_invalid_transition(self, admin_client, resident, create_document_request):
        document_request = create_document_request(resident, status="rejected")

        response = admin_client.put(
            reverse("document-status", kwargs={"request_pk": document_request.pk}),
            {"status": "approved"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "invalid_transition"
        document_request.refresh_from_db()
        assert document_request.status == DocumentRequest.STATUS_REJECTED

    def test_resident_list_filtered(
        self, resident_client, resident, create_resident, create_document_request
    ):
        other = create_resident(first_name="Pedro")
        create_document_request(resident)
        create_document_request(other)

        response = resident_client.get(reverse("document-list"))

        assert response.status_code == status.HTTP_200_OK
        assert [r["residentId"] for r in response.data] == [resident.resident_id]

    def test_resident_cannot_fetch_others_qr_code(
        self, resident_client, create_resident, create_document_request
    ):
        other = create_resident(first_name="Pedro")
        document_request = create_document_request(other, status="approved")

        response = resident_client.get(
            reverse("document-qrcode", kwargs={"request_pk": document_request.pk})
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["code"] == "unauthorized"
        document_request.refresh_from_db()
        assert document_request.verification_code is None


@pytest.mark.django_db
class TestAnnouncementAPI:
    def test_admin_creates_announcement(self, admin_client):
        data = {
            "title": "Water interruption",
            "category": "Utilities",
            "type": "warning",
            "content": "No water supply on Saturday from 8 AM to 5 PM.",
        }

        response = admin_client.post(reverse("announcement-list"), data, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["type"] == "warning"
        assert Announcement.objects.get().announcement_type == "warning"

    def test_resident_reads_but_cannot_delete(self, resident_client):
        announcement = Announcement.objects.create(
            title="Curfew reminder", category="Safety", announcement_type="info", content="10 PM"
        )
        url = reverse("announcement-detail", kwargs={"announcement_id": announcement.pk})

        assert resident_client.get(url).status_code == status.HTTP_200_OK
        assert resident_client.delete(url).status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestQrCodeAPI:
    """Test cases for QR verification endpoints."""

    def test_verify_resident(self, admin_client, resident):
        scanned = serialize_payload(verification.build_payload(resident))

        response = admin_client.post(
            reverse("qrcode-verify"), {"scannedData": scanned}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["verified"] is True
        assert response.data["data"]["id"] == resident.resident_id

    def test_verify_accepts_object(self, admin_client, resident):
        response = admin_client.post(
            reverse("qrcode-verify"),
            {"scannedData": {"type": "Resident", "id": resident.resident_id}},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK

    def test_verify_pending_request(self, admin_client, resident, create_document_request):
        document_request = create_document_request(resident)

        response = admin_client.post(
            reverse("qrcode-verify"),
            {"scannedData": {"type": "DocumentRequest", "requestId": document_request.request_id}},
            format="json",
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["verified"] is False
        assert response.data["message"] == "DocumentRequest not found or not valid"

    @pytest.mark.parametrize(
        "scanned,code",
        [
            ("this is not json", "malformed_input"),
            ('{"id": "R-2025001"}', "missing_type"),
            ('{"type": "Vehicle", "id": "ABC-123"}', "unknown_type"),
        ],
    )
    def test_verify_rejects_bad_payloads(self, admin_client, scanned, code):
        response = admin_client.post(
            reverse("qrcode-verify"), {"scannedData": scanned}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == code

    def test_verify_requires_scanned_data(self, admin_client):
        response = admin_client.post(reverse("qrcode-verify"), {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_generate(self, admin_client):
        response = admin_client.post(
            reverse("qrcode-generate"), {"data": {"hello": "world"}}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["qrCode"].startswith(DATA_URL_PREFIX)


@pytest.mark.django_db
class TestHealthAPI:
    def test_health_check(self, api_client):
        response = api_client.get(reverse("health_check"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["checks"]["database"] == "ok"

    def test_readiness_check(self, api_client):
        response = api_client.get(reverse("readiness_check"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["checks"]["identifier_sequences"] == "ok"

    def test_readiness_check_without_identifier_store(self, api_client, mocker):
        mocker.patch.object(
            IdentifierSequence.objects, "exists", side_effect=DatabaseError("no such table")
        )

        response = api_client.get(reverse("readiness_check"))

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data["status"] == "not ready"


@pytest.mark.django_db
class TestErrorHandling:
    def test_database_error_becomes_store_failure(self, admin_client, mocker):
        mocker.patch(
            "barangay.api.views.ResidentService.list_residents",
            side_effect=DatabaseError("connection lost"),
        )

        response = admin_client.get(reverse("resident-list"))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {"error": "Server error", "code": "store_failure"}
