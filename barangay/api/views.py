from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from barangay.api.handlers import flatten_messages
from barangay.api.permissions import IsAdmin
from barangay.api.serializers import (
    AnnouncementSerializer,
    AttendeeSerializer,
    DocumentRequestSerializer,
    DocumentStatusSerializer,
    EventSerializer,
    FamilyHeadSerializer,
    QrGenerateSerializer,
    ResidentSerializer,
    VerifySerializer,
)
from barangay.exceptions import NotFound
from barangay.models import Announcement
from barangay.services.document_service import DocumentRequestService
from barangay.services.event_service import EventService
from barangay.services.qr import encode_qr_data_url
from barangay.services.resident_service import FamilyHeadService, ResidentService
from barangay.services.verification import VerificationService


def validation_error(serializer):
    return Response(
        {"error": ", ".join(flatten_messages(serializer.errors)), "errors": serializer.errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


class AdminWritePermissionMixin:
    """Any authenticated user may read; only admins may write."""

    def get_permissions(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsAdmin()]


# Residents


class ResidentListView(APIView):
    """
    GET  /api/residents/   list all residents (admin)
    POST /api/residents/   register a resident (admin); allocates an R- identifier
    """

    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request):
        residents = ResidentService().list_residents()
        return Response(ResidentSerializer(residents, many=True).data)

    def post(self, request):
        serializer = ResidentSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        resident = ResidentService().create_resident(serializer.validated_data)
        return Response(ResidentSerializer(resident).data, status=status.HTTP_201_CREATED)


class ResidentDetailView(APIView):
    """
    GET    /api/residents/{resident_id}/   admin or the resident themselves
    PUT    /api/residents/{resident_id}/   admin or the resident themselves
    DELETE /api/residents/{resident_id}/   admin
    """

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [IsAuthenticated(), IsAdmin()]
        return [IsAuthenticated()]

    def get(self, request, resident_id):
        resident = ResidentService().get_resident(resident_id, request.user)
        return Response(ResidentSerializer(resident).data)

    def put(self, request, resident_id):
        serializer = ResidentSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        resident = ResidentService().update_resident(
            resident_id, serializer.validated_data, request.user
        )
        return Response(ResidentSerializer(resident).data)

    def delete(self, request, resident_id):
        ResidentService().delete_resident(resident_id)
        return Response({"message": "Resident deleted successfully"})


class ResidentQrCodeView(APIView):
    """GET /api/residents/{resident_id}/qrcode/ - admin or the resident themselves."""

    def get(self, request, resident_id):
        qr_code = ResidentService().get_qr_code(resident_id, request.user)
        return Response({"qrCode": qr_code})


# Family heads


class FamilyHeadListView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request):
        family_heads = FamilyHeadService().list_family_heads()
        return Response(FamilyHeadSerializer(family_heads, many=True).data)

    def post(self, request):
        serializer = FamilyHeadSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        family_head = FamilyHeadService().create_family_head(serializer.validated_data)
        return Response(FamilyHeadSerializer(family_head).data, status=status.HTTP_201_CREATED)


class FamilyHeadDetailView(APIView):
    """
    GET    /api/familyHeads/{head_id}/
    PUT    /api/familyHeads/{head_id}/   address changes are copied to all members
    DELETE /api/familyHeads/{head_id}/   refused while members exist
    """

    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request, head_id):
        family_head = FamilyHeadService().get_family_head(head_id)
        return Response(FamilyHeadSerializer(family_head).data)

    def put(self, request, head_id):
        serializer = FamilyHeadSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        family_head = FamilyHeadService().update_family_head(head_id, serializer.validated_data)
        return Response(FamilyHeadSerializer(family_head).data)

    def delete(self, request, head_id):
        FamilyHeadService().delete_family_head(head_id)
        return Response({"message": "Family head deleted successfully"})


class FamilyHeadMembersView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request, head_id):
        members = FamilyHeadService().get_members(head_id)
        return Response(ResidentSerializer(members, many=True).data)


class FamilyHeadQrCodeView(APIView):
    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request, head_id):
        return Response({"qrCode": FamilyHeadService().get_qr_code(head_id)})


# Events


class EventListView(AdminWritePermissionMixin, APIView):
    def get(self, request):
        events = EventService().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request):
        serializer = EventSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        event = EventService().create_event(serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(AdminWritePermissionMixin, APIView):
    """
    GET    /api/events/{id}/
    PUT    /api/events/{id}/   omitted time keeps the current value
    DELETE /api/events/{id}/
    """

    def get(self, request, event_id):
        event = EventService().get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request, event_id):
        service = EventService()
        event = service.get_event(event_id)

        data = dict(request.data)
        if not data.get("time"):
            data["time"] = event.time

        serializer = EventSerializer(data=data)
        if not serializer.is_valid():
            return validation_error(serializer)

        event = service.update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)

    def delete(self, request, event_id):
        EventService().delete_event(event_id)
        return Response({"message": "Event deleted successfully"})


class EventQrCodeView(APIView):
    def get(self, request, event_id):
        return Response({"qrCode": EventService().get_qr_code(event_id)})


class EventRegisterView(APIView):
    """
    POST /api/events/{id}/register/

    Request body:
    {
        "attendee": {"id": "R-2025001", "name": "Juan Dela Cruz", "contactNumber": "09171234567"}
    }
    """

    def post(self, request, event_id):
        attendee = request.data.get("attendee")
        if not isinstance(attendee, dict):
            return Response(
                {"error": "Attendee information is required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = AttendeeSerializer(data=attendee)
        if not serializer.is_valid():
            return Response(
                {"error": "Attendee ID and name are required", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        attendees = EventService().register_attendee(event_id, serializer.validated_data)
        return Response(
            {
                "message": "Registration successful",
                "attendees": AttendeeSerializer(attendees, many=True).data,
            },
            status=status.HTTP_200_OK,
        )


class EventUnregisterView(APIView):
    """DELETE /api/events/{id}/register/{attendee_id}/ - admin or the attendee themselves."""

    def delete(self, request, event_id, attendee_id):
        attendees = EventService().unregister_attendee(event_id, attendee_id, request.user)
        return Response(
            {
                "message": "Unregistration successful",
                "attendees": AttendeeSerializer(attendees, many=True).data,
            },
            status=status.HTTP_200_OK,
        )


# Document requests


class DocumentRequestListView(APIView):
    """
    GET  /api/documents/   admins see every request, residents only their own
    POST /api/documents/   residents may only file for themselves
    """

    def get(self, request):
        requests = DocumentRequestService().list_requests(request.user)
        return Response(DocumentRequestSerializer(requests, many=True).data)

    def post(self, request):
        serializer = DocumentRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        document_request = DocumentRequestService().create_request(
            serializer.validated_data, request.user
        )
        return Response(
            DocumentRequestSerializer(document_request).data, status=status.HTTP_201_CREATED
        )


class ResidentDocumentRequestsView(APIView):
    def get(self, request, resident_id):
        requests = DocumentRequestService().list_resident_requests(resident_id, request.user)
        return Response(DocumentRequestSerializer(requests, many=True).data)


class DocumentRequestDetailView(APIView):
    def get(self, request, request_pk):
        document_request = DocumentRequestService().get_request(request_pk, request.user)
        return Response(DocumentRequestSerializer(document_request).data)

    def delete(self, request, request_pk):
        DocumentRequestService().delete_request(request_pk, request.user)
        return Response({"message": "Document request deleted successfully"})


class DocumentRequestStatusView(APIView):
    """
    PUT /api/documents/{id}/status/

    Request body:
    {
        "status": "approved",
        "processingNotes": "Ready for pickup"
    }
    """

    permission_classes = [IsAuthenticated, IsAdmin]

    def put(self, request, request_pk):
        serializer = DocumentStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        document_request = DocumentRequestService().update_status(
            request_pk,
            serializer.validated_data["status"],
            serializer.validated_data["processingNotes"],
            request.user.username,
        )
        return Response(DocumentRequestSerializer(document_request).data)


class DocumentRequestQrCodeView(APIView):
    """GET /api/documents/{id}/qrcode/ - 400 until the request is approved."""

    def get(self, request, request_pk):
        qr_code = DocumentRequestService().get_qr_code(request_pk, request.user)
        return Response({"qrCode": qr_code})


# Announcements


class AnnouncementListView(AdminWritePermissionMixin, APIView):
    def get(self, request):
        announcements = Announcement.objects.all()
        return Response(AnnouncementSerializer(announcements, many=True).data)

    def post(self, request):
        serializer = AnnouncementSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        announcement = serializer.save()
        return Response(AnnouncementSerializer(announcement).data, status=status.HTTP_201_CREATED)


class AnnouncementDetailView(AdminWritePermissionMixin, APIView):
    def get_object(self, announcement_id):
        announcement = Announcement.objects.filter(pk=announcement_id).first()
        if not announcement:
            raise NotFound("Announcement not found")
        return announcement

    def get(self, request, announcement_id):
        return Response(AnnouncementSerializer(self.get_object(announcement_id)).data)

    def put(self, request, announcement_id):
        serializer = AnnouncementSerializer(self.get_object(announcement_id), data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        announcement = serializer.save()
        return Response(AnnouncementSerializer(announcement).data)

    def delete(self, request, announcement_id):
        self.get_object(announcement_id).delete()
        return Response({"message": "Announcement deleted successfully"})


# QR codes


class QrCodeVerifyView(APIView):
    """
    POST /api/qrcode/verify/

    Request body:
    {
        "scannedData": "{\"type\": \"Resident\", \"id\": \"R-2025001\", ...}"
    }

    Responses:
        200 {"verified": true, "type": ..., "data": {...}}
        404 {"verified": false, "type": ..., "message": ...}
        400 malformed payload, missing or unknown type
    """

    def post(self, request):
        serializer = VerifySerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        result = VerificationService().verify(serializer.validated_data["scannedData"])

        if result["verified"]:
            return Response(result, status=status.HTTP_200_OK)
        else:
            return Response(result, status=status.HTTP_404_NOT_FOUND)


class QrCodeGenerateView(APIView):
    """POST /api/qrcode/generate/ - render arbitrary JSON data as a QR code."""

    def post(self, request):
        serializer = QrGenerateSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        return Response({"qrCode": encode_qr_data_url(serializer.validated_data["data"])})
