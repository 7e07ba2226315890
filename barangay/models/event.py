from django.db import models
from django.utils import timezone


class Event(models.Model):
    """Community event residents can register for."""

    # Changing any of these invalidates the stored verification code
    SIGNIFICANT_FIELDS = ("title", "event_date", "location")

    title = models.CharField(max_length=255)
    description = models.TextField()
    category = models.CharField(max_length=100)
    event_date = models.DateTimeField()
    time = models.CharField(max_length=50)
    location = models.CharField(max_length=255)
    created_date = models.DateTimeField(default=timezone.now)
    verification_code = models.TextField(blank=True, null=True)

    class Meta:
        db_table = "events"
        ordering = ["event_date"]

    def __str__(self):
        return f"{self.title} ({self.event_date:%Y-%m-%d})"


class EventAttendee(models.Model):
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="attendees")
    attendee_id = models.CharField(max_length=50)
    name = models.CharField(max_length=255)
    contact_number = models.CharField(max_length=30, blank=True, default="")
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "event_attendees"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "attendee_id"], name="unique_event_attendee"
            ),
        ]

    def __str__(self):
        return f"{self.name} @ {self.event_id}"
