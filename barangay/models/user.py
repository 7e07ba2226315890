from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Portal account. Residents are bound to exactly one resident record."""

    ROLE_ADMIN = "admin"
    ROLE_RESIDENT = "resident"

    ROLE_CHOICES = [
        (ROLE_ADMIN, "Administrator"),
        (ROLE_RESIDENT, "Resident"),
    ]

    name = models.CharField(max_length=255)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_RESIDENT)
    resident_id = models.CharField(
        max_length=20,
        unique=True,
        blank=True,
        null=True,
        help_text="Resident record this account belongs to (resident role only)",
    )

    class Meta:
        db_table = "users"

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def is_admin(self) -> bool:
        return self.role == self.ROLE_ADMIN

    def can_access_resident(self, resident_id: str) -> bool:
        """Admins may act on any resident; residents only on themselves."""
        return self.is_admin or (bool(self.resident_id) and self.resident_id == resident_id)
