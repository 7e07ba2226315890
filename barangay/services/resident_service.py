import logging
from django.db import transaction
from barangay.exceptions import BarangayError, NotFound, Unauthorized
from barangay.models import FamilyHead, Resident
from barangay.services import identifiers, verification

logger = logging.getLogger(__name__)


class ResidentService:
    """Service class for resident records."""

    def list_residents(self):
        return Resident.objects.all()

    def get_resident(self, resident_id: str, user=None) -> Resident:
        """
        Fetch a resident, enforcing that residents only see themselves.

        Raises:
            Unauthorized: caller is a resident asking for someone else
            NotFound: no resident with that identifier
        """
        if user is not None and not user.can_access_resident(resident_id):
            raise Unauthorized("Not authorized to view this resident")

        resident = Resident.objects.filter(resident_id=resident_id).first()
        if not resident:
            raise NotFound("Resident not found")
        return resident

    def _resolve_family_head(self, family_head_id):
        if not family_head_id:
            return None
        family_head = FamilyHead.objects.filter(head_id=family_head_id).first()
        if not family_head:
            raise BarangayError("Family head does not exist")
        return family_head

    def create_resident(self, resident_data: dict) -> Resident:
        """
        Register a new resident under a freshly allocated R- identifier.

        A resident attached to a family head takes the head's address.
        """
        data = dict(resident_data)
        family_head = self._resolve_family_head(data.pop("family_head_id", None))
        if family_head:
            data["address"] = family_head.address

        resident = identifiers.create_with_identifier(
            identifiers.RESIDENT,
            lambda resident_id: Resident.objects.create(
                resident_id=resident_id, family_head=family_head, **data
            ),
        )
        logger.info(f"Created resident {resident.resident_id}")
        return resident

    def update_resident(self, resident_id: str, resident_data: dict, user=None) -> Resident:
        if user is not None and not user.can_access_resident(resident_id):
            raise Unauthorized("Not authorized to update this resident")

        resident = self.get_resident(resident_id)
        data = dict(resident_data)

        family_head = self._resolve_family_head(data.pop("family_head_id", None))
        if family_head and family_head.head_id != resident.family_head_id:
            data["address"] = family_head.address
        resident.family_head = family_head

        for field, value in data.items():
            setattr(resident, field, value)
        resident.save()

        logger.info(f"Updated resident {resident_id}")
        return resident

    def delete_resident(self, resident_id: str) -> None:
        resident = self.get_resident(resident_id)
        resident.delete()
        logger.info(f"Deleted resident {resident_id}")

    def get_qr_code(self, resident_id: str, user) -> str:
        if not user.can_access_resident(resident_id):
            raise Unauthorized("Not authorized to access this QR code")

        resident = self.get_resident(resident_id)
        return verification.ensure_code(resident, verification.RESIDENT)


class FamilyHeadService:
    """Service class for family head records."""

    def list_family_heads(self):
        return FamilyHead.objects.all()

    def get_family_head(self, head_id: str) -> FamilyHead:
        family_head = FamilyHead.objects.filter(head_id=head_id).first()
        if not family_head:
            raise NotFound("Family head not found")
        return family_head

    def create_family_head(self, head_data: dict) -> FamilyHead:
        family_head = identifiers.create_with_identifier(
            identifiers.FAMILY_HEAD,
            lambda head_id: FamilyHead.objects.create(head_id=head_id, **head_data),
        )
        logger.info(f"Created family head {family_head.head_id}")
        return family_head

    def update_family_head(self, head_id: str, head_data: dict) -> FamilyHead:
        """Update a family head; an address change is copied to every member."""
        family_head = self.get_family_head(head_id)
        old_address = family_head.address

        with transaction.atomic():
            for field, value in head_data.items():
                setattr(family_head, field, value)
            family_head.save()

            if family_head.address != old_address:
                updated = Resident.objects.filter(family_head_id=head_id).update(
                    address=family_head.address
                )
                logger.info(f"Moved {updated} members of {head_id} to the new address")

        return family_head

    def delete_family_head(self, head_id: str) -> None:
        family_head = self.get_family_head(head_id)

        if Resident.objects.filter(family_head_id=head_id).exists():
            raise BarangayError(
                "Cannot delete family head with existing members. "
                "Please reassign or delete members first."
            )

        family_head.delete()
        logger.info(f"Deleted family head {head_id}")

    def get_members(self, head_id: str):
        self.get_family_head(head_id)
        return Resident.objects.filter(family_head_id=head_id)

    def get_qr_code(self, head_id: str) -> str:
        family_head = self.get_family_head(head_id)
        return verification.ensure_code(family_head, verification.FAMILY_HEAD)
