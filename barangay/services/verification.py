"""
QR verification: payload building, cached codes and scan verification.

Each verifiable entity kind is a VerificationStrategy keyed by the ``type``
discriminator that travels inside the scanned payload. Adding a kind means
adding one strategy class and one STRATEGIES entry.
"""

import json
import logging
from abc import ABC, abstractmethod
from barangay.exceptions import MalformedInput, MissingType, NotEligible, UnknownType
from barangay.models import DocumentRequest, Event, FamilyHead, Resident
from barangay.services.qr import encode_qr_data_url

logger = logging.getLogger(__name__)

RESIDENT = "Resident"
FAMILY_HEAD = "Family Head"
EVENT = "Event"
DOCUMENT_REQUEST = "DocumentRequest"


def _isoformat(value):
    return value.isoformat() if value is not None else None


class VerificationStrategy(ABC):
    """Payload, lookup and projection rules for one entity kind."""

    type_name = None
    model = None
    # payload key carrying the lookup identifier
    payload_key = "id"

    @abstractmethod
    def build_payload(self, entity) -> dict:
        ...

    @abstractmethod
    def lookup(self, identifier):
        ...

    def is_verifiable(self, entity) -> bool:
        return True

    @abstractmethod
    def project(self, entity) -> dict:
        ...

    def identifier_from(self, payload: dict):
        return payload.get(self.payload_key)


class PersonStrategy(VerificationStrategy):
    id_field = None

    def build_payload(self, entity) -> dict:
        return {
            "type": self.type_name,
            "id": getattr(entity, self.id_field),
            "name": entity.full_name,
            "gender": entity.gender,
        }

    def lookup(self, identifier):
        if not isinstance(identifier, str) or not identifier:
            return None
        return self.model.objects.filter(**{self.id_field: identifier}).first()

    def project(self, entity) -> dict:
        return {
            "id": getattr(entity, self.id_field),
            "name": entity.full_name,
            "type": self.type_name,
            "gender": entity.gender,
            "address": entity.address,
            "contactNumber": entity.contact_number,
        }


class ResidentStrategy(PersonStrategy):
    type_name = RESIDENT
    model = Resident
    id_field = "resident_id"


class FamilyHeadStrategy(PersonStrategy):
    type_name = FAMILY_HEAD
    model = FamilyHead
    id_field = "head_id"


class EventStrategy(VerificationStrategy):
    type_name = EVENT
    model = Event

    def build_payload(self, entity) -> dict:
        return {
            "type": EVENT,
            "id": str(entity.pk),
            "title": entity.title,
            "date": _isoformat(entity.event_date),
            "location": entity.location,
        }

    def lookup(self, identifier):
        try:
            pk = int(str(identifier))
        except (TypeError, ValueError):
            return None
        return Event.objects.filter(pk=pk).first()

    def project(self, entity) -> dict:
        return {
            "id": str(entity.pk),
            "title": entity.title,
            "date": _isoformat(entity.event_date),
            "location": entity.location,
            "type": EVENT,
            "category": entity.category,
            "attendees": entity.attendees.count(),
        }


class DocumentRequestStrategy(VerificationStrategy):
    type_name = DOCUMENT_REQUEST
    model = DocumentRequest
    payload_key = "requestId"

    def build_payload(self, entity) -> dict:
        return {
            "type": DOCUMENT_REQUEST,
            "requestId": entity.request_id,
            "residentId": entity.resident_id,
            "residentName": entity.resident_name,
            "documentType": entity.document_type,
            "status": entity.status,
            "date": _isoformat(entity.request_date),
        }

    def lookup(self, identifier):
        if not isinstance(identifier, str) or not identifier:
            return None
        return DocumentRequest.objects.filter(request_id=identifier).first()

    def is_verifiable(self, entity) -> bool:
        return entity.is_verifiable

    def project(self, entity) -> dict:
        return {
            "requestId": entity.request_id,
            "residentId": entity.resident_id,
            "residentName": entity.resident_name,
            "documentType": entity.document_type,
            "status": entity.status,
            "date": _isoformat(entity.request_date),
            "type": DOCUMENT_REQUEST,
        }


STRATEGIES = {
    strategy.type_name: strategy
    for strategy in (
        ResidentStrategy(),
        FamilyHeadStrategy(),
        EventStrategy(),
        DocumentRequestStrategy(),
    )
}

_STRATEGIES_BY_MODEL = {strategy.model: strategy for strategy in STRATEGIES.values()}


def strategy_for(kind: str) -> VerificationStrategy:
    try:
        return STRATEGIES[kind]
    except KeyError:
        raise UnknownType()


def strategy_for_entity(entity) -> VerificationStrategy:
    return _STRATEGIES_BY_MODEL[type(entity)]


def build_payload(entity, kind: str = None) -> dict:
    strategy = strategy_for(kind) if kind else strategy_for_entity(entity)
    return strategy.build_payload(entity)


def refresh_code(entity, kind: str = None) -> str:
    """Rebuild the verification code in memory; the caller persists it."""
    strategy = strategy_for(kind) if kind else strategy_for_entity(entity)
    entity.verification_code = encode_qr_data_url(strategy.build_payload(entity))
    return entity.verification_code


def ensure_code(entity, kind: str = None) -> str:
    """
    Return the entity's verification code, generating and storing it once.

    Raises:
        NotEligible: document request that is not approved or completed
    """
    if entity.verification_code:
        return entity.verification_code

    strategy = strategy_for(kind) if kind else strategy_for_entity(entity)
    if not strategy.is_verifiable(entity):
        raise NotEligible()

    refresh_code(entity, strategy.type_name)
    entity.save(update_fields=["verification_code"])
    logger.info(f"Generated verification code for {strategy.type_name} {entity.pk}")
    return entity.verification_code


class VerificationService:
    """Service class for verifying scanned QR code payloads."""

    def decode(self, scanned_data) -> dict:
        if isinstance(scanned_data, dict):
            return scanned_data
        if isinstance(scanned_data, (bytes, bytearray)):
            try:
                scanned_data = scanned_data.decode("utf-8")
            except UnicodeDecodeError:
                raise MalformedInput()
        if not isinstance(scanned_data, str):
            raise MalformedInput()
        try:
            parsed = json.loads(scanned_data)
        except ValueError:
            raise MalformedInput()
        if not isinstance(parsed, dict):
            raise MalformedInput()
        return parsed

    def verify(self, scanned_data) -> dict:
        """
        Verify a scanned payload against the stored records.

        Args:
            scanned_data: JSON text read from a QR code, or the decoded mapping

        Returns:
            dict: ``verified`` and ``type``, plus ``data`` when verified or
            ``message`` when not

        Raises:
            MalformedInput, MissingType, UnknownType
        """
        payload = self.decode(scanned_data)

        kind = payload.get("type")
        if not kind:
            raise MissingType()
        if not isinstance(kind, str):
            raise UnknownType()

        strategy = strategy_for(kind)
        identifier = strategy.identifier_from(payload)
        entity = strategy.lookup(identifier)

        if entity is None or not strategy.is_verifiable(entity):
            logger.info(f"Verification failed: {kind} with ID {identifier} not found or not valid")
            return {
                "verified": False,
                "type": kind,
                "message": f"{kind} not found or not valid",
            }

        logger.info(f"Verification successful: {kind} {identifier}")
        return {"verified": True, "type": kind, "data": strategy.project(entity)}
