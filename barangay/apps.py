from django.apps import AppConfig


class BarangayConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "barangay"
    verbose_name = "Barangay Management"

    def ready(self):
        """Import signal handlers and other app initialization code."""
        import barangay.signals  # noqa
