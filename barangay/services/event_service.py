import logging
from django.db import IntegrityError, transaction
from barangay.exceptions import BarangayError, NotFound, Unauthorized
from barangay.models import Event, EventAttendee
from barangay.services import verification

logger = logging.getLogger(__name__)


class EventService:
    """Service class for community events and their attendee lists."""

    def list_events(self):
        return Event.objects.prefetch_related("attendees").all()

    def get_event(self, event_id) -> Event:
        event = Event.objects.filter(pk=event_id).first()
        if not event:
            raise NotFound("Event not found")
        return event

    def create_event(self, event_data: dict) -> Event:
        event = Event.objects.create(**event_data)
        logger.info(f"Created event {event.pk} ({event.title})")
        return event

    def update_event(self, event_id, event_data: dict) -> Event:
        """Update an event. A stored code follows title, date and location changes."""
        event = self.get_event(event_id)
        for field, value in event_data.items():
            setattr(event, field, value)
        event.save()
        logger.info(f"Updated event {event.pk}")
        return event

    def delete_event(self, event_id) -> None:
        event = self.get_event(event_id)
        event.delete()
        logger.info(f"Deleted event {event_id}")

    def register_attendee(self, event_id, attendee_data: dict):
        """
        Add an attendee to an event.

        Args:
            event_id: internal event id
            attendee_data: attendee_id, name and optional contact_number

        Returns:
            list: the event's attendees in registration order

        Raises:
            NotFound: unknown event
            BarangayError: attendee already registered
        """
        event = self.get_event(event_id)
        attendee_id = attendee_data["attendee_id"]

        if event.attendees.filter(attendee_id=attendee_id).exists():
            raise BarangayError("Attendee already registered for this event")

        try:
            with transaction.atomic():
                EventAttendee.objects.create(event=event, **attendee_data)
        except IntegrityError:
            raise BarangayError("Attendee already registered for this event")

        logger.info(f"Registered {attendee_id} for event {event.pk}")
        return list(event.attendees.all())

    def unregister_attendee(self, event_id, attendee_id: str, user):
        event = self.get_event(event_id)

        if not user.can_access_resident(attendee_id):
            raise Unauthorized("Not authorized to unregister this attendee")

        attendee = event.attendees.filter(attendee_id=attendee_id).first()
        if not attendee:
            raise NotFound("Attendee not registered for this event")

        attendee.delete()
        logger.info(f"Unregistered {attendee_id} from event {event.pk}")
        return list(event.attendees.all())

    def get_qr_code(self, event_id) -> str:
        event = self.get_event(event_id)
        return verification.ensure_code(event, verification.EVENT)
