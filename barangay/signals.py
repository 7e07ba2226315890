import logging
from django.db.models.signals import pre_save
from django.dispatch import receiver
from barangay.models import DocumentRequest, Event
from barangay.services.verification import refresh_code

logger = logging.getLogger(__name__)


def _is_full_save(instance, update_fields) -> bool:
    return instance.pk is not None and update_fields is None


@receiver(pre_save, sender=Event)
def event_pre_save(sender, instance, update_fields=None, **kwargs):
    """Rebuild a stored event code when title, date or location change."""
    if not _is_full_save(instance, update_fields) or not instance.verification_code:
        return

    previous = Event.objects.filter(pk=instance.pk).values(*Event.SIGNIFICANT_FIELDS).first()
    if previous is None:
        return

    changed = [
        field
        for field in Event.SIGNIFICANT_FIELDS
        if previous[field] != getattr(instance, field)
    ]
    if changed:
        refresh_code(instance)
        logger.info(f"Regenerated verification code for event {instance.pk} ({', '.join(changed)} changed)")


@receiver(pre_save, sender=DocumentRequest)
def document_request_pre_save(sender, instance, update_fields=None, **kwargs):
    """Keep the request's code in step with its status."""
    if not _is_full_save(instance, update_fields):
        return

    previous_status = (
        DocumentRequest.objects.filter(pk=instance.pk).values_list("status", flat=True).first()
    )
    if previous_status is None or previous_status == instance.status:
        return

    if instance.is_verifiable:
        refresh_code(instance)
        logger.info(
            f"Generated verification code for {instance.request_id} ({previous_status} -> {instance.status})"
        )
    elif instance.verification_code:
        instance.verification_code = None
        logger.info(f"Cleared verification code for {instance.request_id} ({instance.status})")
