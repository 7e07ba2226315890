from django.db import models
from django.utils import timezone


GENDER_CHOICES = [
    ("Male", "Male"),
    ("Female", "Female"),
    ("Other", "Other"),
]


class PersonRecord(models.Model):
    """Fields shared by residents and family heads."""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES)
    birth_date = models.DateField()
    address = models.CharField(max_length=500)
    registration_date = models.DateTimeField(default=timezone.now)
    verification_code = models.TextField(
        blank=True, null=True, help_text="QR code data URL, generated on first request"
    )

    class Meta:
        abstract = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class FamilyHead(PersonRecord):
    """Head of a household. Residents point here through ``family_head``."""

    head_id = models.CharField(max_length=20, unique=True, db_index=True)
    contact_number = models.CharField(max_length=30)

    class Meta:
        db_table = "family_heads"
        ordering = ["head_id"]

    def __str__(self):
        return f"{self.full_name} ({self.head_id})"


class Resident(PersonRecord):
    """A registered barangay resident."""

    resident_id = models.CharField(max_length=20, unique=True, db_index=True)
    contact_number = models.CharField(max_length=30, blank=True, default="")
    family_head = models.ForeignKey(
        FamilyHead,
        to_field="head_id",
        db_column="family_head_id",
        on_delete=models.PROTECT,
        related_name="members",
        blank=True,
        null=True,
        help_text="Household this resident belongs to",
    )

    class Meta:
        db_table = "residents"
        ordering = ["resident_id"]
        indexes = [
            models.Index(fields=["last_name", "first_name"], name="residents_name_idx"),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.resident_id})"
