from django.db import models
from django.utils import timezone


class DocumentRequest(models.Model):
    """
    A resident's request for a barangay-issued document.

    Status moves pending -> approved | rejected, then approved -> completed.
    Only approved and completed requests carry a verification code.
    """

    STATUS_PENDING = "pending"
    STATUS_APPROVED = "approved"
    STATUS_REJECTED = "rejected"
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
        (STATUS_COMPLETED, "Completed"),
    ]

    VERIFIABLE_STATUSES = (STATUS_APPROVED, STATUS_COMPLETED)

    ALLOWED_TRANSITIONS = {
        STATUS_PENDING: (STATUS_APPROVED, STATUS_REJECTED),
        STATUS_APPROVED: (STATUS_COMPLETED,),
        STATUS_REJECTED: (),
        STATUS_COMPLETED: (),
    }

    DOCUMENT_TYPE_CHOICES = [
        ("barangay-clearance", "Barangay Clearance"),
        ("residency", "Certificate of Residency"),
        ("indigency", "Certificate of Indigency"),
        ("good-conduct", "Certificate of Good Conduct"),
        ("business-permit", "Business Permit"),
    ]

    DELIVERY_CHOICES = [
        ("pickup", "Pickup"),
        ("email", "Email"),
        ("delivery", "Delivery"),
    ]

    request_id = models.CharField(max_length=20, unique=True, db_index=True)
    resident_id = models.CharField(max_length=20, db_index=True)
    resident_name = models.CharField(max_length=255)
    document_type = models.CharField(max_length=30, choices=DOCUMENT_TYPE_CHOICES)
    purpose = models.CharField(max_length=500)
    additional_details = models.TextField(blank=True, default="")
    delivery_option = models.CharField(max_length=20, choices=DELIVERY_CHOICES)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True
    )
    request_date = models.DateTimeField(default=timezone.now)
    processing_date = models.DateTimeField(blank=True, null=True)
    processing_notes = models.TextField(blank=True, default="")
    processed_by = models.CharField(max_length=150, blank=True, null=True)
    verification_code = models.TextField(blank=True, null=True)

    class Meta:
        db_table = "document_requests"
        ordering = ["-request_date"]

    def __str__(self):
        return f"{self.request_id} {self.document_type} ({self.status})"

    @property
    def is_verifiable(self) -> bool:
        return self.status in self.VERIFIABLE_STATUSES

    def can_transition_to(self, new_status: str) -> bool:
        return new_status in self.ALLOWED_TRANSITIONS.get(self.status, ())
