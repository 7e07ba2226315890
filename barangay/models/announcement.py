from django.db import models
from django.utils import timezone


class Announcement(models.Model):
    TYPE_CHOICES = [
        ("important", "Important"),
        ("warning", "Warning"),
        ("info", "Info"),
    ]

    title = models.CharField(max_length=255)
    category = models.CharField(max_length=100)
    announcement_type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_column="type")
    content = models.TextField()
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "announcements"
        ordering = ["-date"]

    def __str__(self):
        return self.title
