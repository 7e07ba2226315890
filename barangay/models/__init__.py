from .user import User
from .resident import FamilyHead, Resident
from .event import Event, EventAttendee
from .document_request import DocumentRequest
from .announcement import Announcement
from .sequence import IdentifierSequence

__all__ = [
    "User",
    "FamilyHead",
    "Resident",
    "Event",
    "EventAttendee",
    "DocumentRequest",
    "Announcement",
    "IdentifierSequence",
]
