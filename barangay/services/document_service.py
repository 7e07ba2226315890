import logging
from django.utils import timezone
from barangay.exceptions import InvalidTransition, NotFound, Unauthorized
from barangay.models import DocumentRequest, Resident
from barangay.services import identifiers, verification

logger = logging.getLogger(__name__)


class DocumentRequestService:
    """Service class for document requests and their processing workflow."""

    def list_requests(self, user):
        """All requests for admins; only their own for residents."""
        requests = DocumentRequest.objects.all()
        if not user.is_admin:
            requests = requests.filter(resident_id=user.resident_id)
        return requests

    def list_resident_requests(self, resident_id: str, user):
        if not user.can_access_resident(resident_id):
            raise Unauthorized("Not authorized to access these requests")
        return DocumentRequest.objects.filter(resident_id=resident_id)

    def get_request(self, request_pk, user=None) -> DocumentRequest:
        document_request = DocumentRequest.objects.filter(pk=request_pk).first()
        if not document_request:
            raise NotFound("Document request not found")

        if user is not None and not user.can_access_resident(document_request.resident_id):
            raise Unauthorized("Not authorized to access this request")
        return document_request

    def create_request(self, request_data: dict, user) -> DocumentRequest:
        """
        File a new pending request under a freshly allocated REQ- identifier.

        Raises:
            Unauthorized: a resident filing for somebody else
            NotFound: unknown resident
        """
        resident_id = request_data["resident_id"]
        if not user.can_access_resident(resident_id):
            raise Unauthorized("You can only create requests for yourself")

        resident = Resident.objects.filter(resident_id=resident_id).first()
        if not resident:
            raise NotFound("Resident not found")

        data = dict(request_data)
        data["resident_name"] = resident.full_name
        data["status"] = DocumentRequest.STATUS_PENDING

        document_request = identifiers.create_with_identifier(
            identifiers.DOCUMENT_REQUEST,
            lambda request_id: DocumentRequest.objects.create(request_id=request_id, **data),
        )
        logger.info(
            f"Created document request {document_request.request_id} for {resident_id}"
        )
        return document_request

    def update_status(
        self, request_pk, new_status: str, processing_notes: str, processed_by: str
    ) -> DocumentRequest:
        """
        Move a request through its workflow.

        Approving or completing a request (re)builds its verification code;
        re-sending the current status only updates the processing notes.

        Raises:
            NotFound: unknown request
            InvalidTransition: transition not allowed from the current status
        """
        document_request = self.get_request(request_pk)
        current_status = document_request.status

        if new_status != current_status and not document_request.can_transition_to(new_status):
            raise InvalidTransition(
                f"Cannot change status from {current_status} to {new_status}"
            )

        document_request.status = new_status
        document_request.processing_date = timezone.now()
        document_request.processing_notes = processing_notes or ""
        document_request.processed_by = processed_by
        document_request.save()

        logger.info(
            f"Document request {document_request.request_id}: {current_status} -> {new_status} by {processed_by}"
        )
        return document_request

    def delete_request(self, request_pk, user) -> None:
        document_request = self.get_request(request_pk, user)
        document_request.delete()
        logger.info(f"Deleted document request {document_request.request_id}")

    def get_qr_code(self, request_pk, user) -> str:
        document_request = self.get_request(request_pk, user)
        return verification.ensure_code(document_request, verification.DOCUMENT_REQUEST)
