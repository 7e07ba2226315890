"""
Human-readable identifier allocation (R-2025001, F-2025001, REQ-2025001).

The year prefix is cosmetic: the running number comes from one durable
counter per kind, so identifiers are unique across years and are never
handed out again after the owning record is deleted.
"""

import logging
from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone
from barangay.models import DocumentRequest, FamilyHead, IdentifierSequence, Resident

logger = logging.getLogger(__name__)

RESIDENT = "resident"
FAMILY_HEAD = "familyHead"
DOCUMENT_REQUEST = "documentRequest"

# kind -> (prefix, model, identifier field)
IDENTIFIER_KINDS = {
    RESIDENT: ("R", Resident, "resident_id"),
    FAMILY_HEAD: ("F", FamilyHead, "head_id"),
    DOCUMENT_REQUEST: ("REQ", DocumentRequest, "request_id"),
}


def _kind_config(kind: str):
    try:
        return IDENTIFIER_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown identifier kind: {kind}")


def _current_year() -> int:
    return timezone.localdate().year


def format_identifier(kind: str, sequence: int, year: int = None) -> str:
    prefix, _, _ = _kind_config(kind)
    year = year if year is not None else _current_year()
    return f"{prefix}-{year}{sequence:03d}"


def parse_sequence(kind: str, identifier: str):
    """Return the running number of an issued identifier, or None if it does not match."""
    prefix, _, _ = _kind_config(kind)
    head = f"{prefix}-"
    if not identifier or not identifier.startswith(head):
        return None
    digits = identifier[len(head) + 4 :]
    if not digits.isdigit():
        return None
    return int(digits)


def _initial_value(kind: str) -> int:
    """Seed for a kind's counter: never below records already stored."""
    _, model, field = _kind_config(kind)
    highest = 0
    for identifier in model.objects.values_list(field, flat=True).iterator():
        sequence = parse_sequence(kind, identifier)
        if sequence is not None and sequence > highest:
            highest = sequence
    return max(highest, model.objects.count())


def allocate(kind: str) -> str:
    """
    Issue the next identifier for a kind.

    Args:
        kind: one of RESIDENT, FAMILY_HEAD, DOCUMENT_REQUEST

    Returns:
        str: formatted identifier, e.g. ``R-2025004``
    """
    _kind_config(kind)

    with transaction.atomic():
        sequence = IdentifierSequence.objects.select_for_update().filter(kind=kind).first()
        if sequence is None:
            sequence, _ = IdentifierSequence.objects.get_or_create(
                kind=kind, defaults={"last_value": _initial_value(kind)}
            )
        IdentifierSequence.objects.filter(kind=kind).update(last_value=F("last_value") + 1)
        sequence.refresh_from_db(fields=["last_value"])
        value = sequence.last_value

    identifier = format_identifier(kind, value)
    logger.info(f"Allocated {kind} identifier {identifier}")
    return identifier


def create_with_identifier(kind: str, create):
    """
    Allocate an identifier and insert the record that carries it.

    A unique-constraint clash (another writer already holds the identifier)
    triggers a fresh allocation, up to IDENTIFIER_MAX_ATTEMPTS times.

    Args:
        kind: identifier kind
        create: callable taking the identifier and persisting the record

    Returns:
        Whatever ``create`` returns
    """
    attempts = max(1, settings.IDENTIFIER_MAX_ATTEMPTS)
    for attempt in range(1, attempts + 1):
        identifier = allocate(kind)
        try:
            with transaction.atomic():
                return create(identifier)
        except IntegrityError:
            if attempt == attempts:
                logger.error(f"Giving up on {kind} identifier after {attempts} attempts")
                raise
            logger.warning(
                f"Identifier {identifier} already taken, retrying ({attempt}/{attempts})"
            )
