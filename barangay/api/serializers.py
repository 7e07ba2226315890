from rest_framework import serializers
from barangay.models import (
    Announcement,
    DocumentRequest,
    Event,
    EventAttendee,
    FamilyHead,
    Resident,
    User,
)


class ResidentSerializer(serializers.ModelSerializer):
    """Serializer for Resident model. The verification code is never exposed."""

    residentId = serializers.CharField(source="resident_id", read_only=True)
    firstName = serializers.CharField(source="first_name", max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    birthDate = serializers.DateField(source="birth_date")
    contactNumber = serializers.CharField(
        source="contact_number", max_length=30, required=False, allow_blank=True
    )
    familyHeadId = serializers.CharField(
        source="family_head_id", required=False, allow_null=True, allow_blank=True
    )
    registrationDate = serializers.DateTimeField(source="registration_date", read_only=True)
    type = serializers.SerializerMethodField()

    class Meta:
        model = Resident
        fields = [
            "residentId",
            "firstName",
            "lastName",
            "gender",
            "birthDate",
            "address",
            "contactNumber",
            "familyHeadId",
            "registrationDate",
            "type",
        ]

    def get_type(self, obj):
        return "Resident"


class FamilyHeadSerializer(serializers.ModelSerializer):
    """Serializer for FamilyHead model."""

    headId = serializers.CharField(source="head_id", read_only=True)
    firstName = serializers.CharField(source="first_name", max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    birthDate = serializers.DateField(source="birth_date")
    contactNumber = serializers.CharField(source="contact_number", max_length=30)
    registrationDate = serializers.DateTimeField(source="registration_date", read_only=True)
    type = serializers.SerializerMethodField()

    class Meta:
        model = FamilyHead
        fields = [
            "headId",
            "firstName",
            "lastName",
            "gender",
            "birthDate",
            "address",
            "contactNumber",
            "registrationDate",
            "type",
        ]

    def get_type(self, obj):
        return "Family Head"


class AttendeeSerializer(serializers.ModelSerializer):
    id = serializers.CharField(source="attendee_id", max_length=50)
    contactNumber = serializers.CharField(
        source="contact_number", max_length=30, required=False, allow_blank=True
    )

    class Meta:
        model = EventAttendee
        fields = ["id", "name", "contactNumber"]


class EventSerializer(serializers.ModelSerializer):
    """Serializer for Event model, attendees included in registration order."""

    eventDate = serializers.DateTimeField(source="event_date")
    createdDate = serializers.DateTimeField(source="created_date", read_only=True)
    attendees = AttendeeSerializer(many=True, read_only=True)

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "description",
            "category",
            "eventDate",
            "time",
            "location",
            "createdDate",
            "attendees",
        ]
        read_only_fields = ["id"]


class DocumentRequestSerializer(serializers.ModelSerializer):
    """Serializer for DocumentRequest model. Processing fields are set by admins only."""

    requestId = serializers.CharField(source="request_id", read_only=True)
    residentId = serializers.CharField(source="resident_id", max_length=20)
    residentName = serializers.CharField(source="resident_name", read_only=True)
    documentType = serializers.ChoiceField(
        source="document_type", choices=DocumentRequest.DOCUMENT_TYPE_CHOICES
    )
    additionalDetails = serializers.CharField(
        source="additional_details", required=False, allow_blank=True
    )
    deliveryOption = serializers.ChoiceField(
        source="delivery_option", choices=DocumentRequest.DELIVERY_CHOICES
    )
    requestDate = serializers.DateTimeField(source="request_date", read_only=True)
    processingDate = serializers.DateTimeField(source="processing_date", read_only=True)
    processingNotes = serializers.CharField(source="processing_notes", read_only=True)
    processedBy = serializers.CharField(source="processed_by", read_only=True)

    class Meta:
        model = DocumentRequest
        fields = [
            "id",
            "requestId",
            "residentId",
            "residentName",
            "documentType",
            "purpose",
            "additionalDetails",
            "status",
            "requestDate",
            "deliveryOption",
            "processingDate",
            "processingNotes",
            "processedBy",
        ]
        read_only_fields = ["id", "status"]


class DocumentStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=DocumentRequest.STATUS_CHOICES)
    processingNotes = serializers.CharField(required=False, allow_blank=True, default="")


class AnnouncementSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(source="announcement_type", choices=Announcement.TYPE_CHOICES)

    class Meta:
        model = Announcement
        fields = ["id", "title", "category", "type", "content", "date"]
        read_only_fields = ["id", "date"]


class UserSerializer(serializers.ModelSerializer):
    residentId = serializers.CharField(source="resident_id", read_only=True)

    class Meta:
        model = User
        fields = ["username", "name", "role", "residentId"]
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(min_length=6, trim_whitespace=False)
    name = serializers.CharField(max_length=255)
    residentId = serializers.CharField(max_length=20)


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(trim_whitespace=False)
    newPassword = serializers.CharField(min_length=6, trim_whitespace=False)


class CreateAdminSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(min_length=6, trim_whitespace=False)
    name = serializers.CharField(max_length=255)
    secretKey = serializers.CharField()


class VerifySerializer(serializers.Serializer):
    """Scanned data arrives either as the raw JSON text or as a decoded object."""

    scannedData = serializers.JSONField()

    def validate_scannedData(self, value):
        if value in (None, "", {}, []):
            raise serializers.ValidationError("Scanned data is required")
        return value


class QrGenerateSerializer(serializers.Serializer):
    data = serializers.JSONField()

    def validate_data(self, value):
        if value in (None, "", {}, []):
            raise serializers.ValidationError("Data is required for QR code generation")
        return value
