from django.db import models


class IdentifierSequence(models.Model):
    """Durable per-kind counter backing the human-readable identifiers."""

    kind = models.CharField(max_length=32, primary_key=True)
    last_value = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "identifier_sequences"

    def __str__(self):
        return f"{self.kind}: {self.last_value}"
