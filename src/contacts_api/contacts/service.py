"""
Contact service: pagination and storage error mapping for the contact API.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.contacts.models import Contact
from contacts_api.contacts.repository import ContactRepository, ContactRepositoryProtocol
from contacts_api.contacts.schemas import (
    ContactCreate,
    ContactPage,
    ContactResponse,
    ContactUpdate,
)
from contacts_api.shared.exceptions import ConflictError, NotFoundError
from contacts_api.shared.logging import get_logger
from contacts_api.shared.pagination import PageRequest, total_pages

logger = get_logger(__name__)


class ContactService:
    """Service for contact management operations."""

    def __init__(
        self,
        session: AsyncSession,
        contact_repository: ContactRepositoryProtocol | None = None,
    ) -> None:
        """Initialize contact service.

        Args:
            session: Async database session.
            contact_repository: Optional contact repository (for DI).
        """
        self._session = session
        self._repo = contact_repository or ContactRepository(session)

    async def list_contacts(self, page_request: PageRequest) -> ContactPage:
        """Get one page of contacts with totals.

        A page past the end yields an empty ``contacts`` list; totals are
        still reported.
        """
        total = await self._repo.count()
        contacts = await self._repo.list_page(
            offset=page_request.offset,
            limit=page_request.limit,
        )

        return ContactPage(
            current_page=page_request.page,
            total_items=total,
            page_size=page_request.page_size,
            total_pages=total_pages(total, page_request.page_size),
            contacts=[ContactResponse.model_validate(c) for c in contacts],
        )

    async def get_contact(self, contact_id: int) -> ContactResponse:
        """Get a contact by ID.

        Raises:
            NotFoundError: If no contact has this ID.
        """
        contact = await self._get_or_raise(contact_id)
        return ContactResponse.model_validate(contact)

    async def create_contact(self, data: ContactCreate) -> ContactResponse:
        """Create a contact and return it with its assigned ID.

        Raises:
            ConflictError: If the row violates a storage constraint.
        """
        contact = Contact(name=data.name, email=data.email)
        try:
            contact = await self._repo.create(contact)
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise self._conflict(e) from e

        logger.info("Contact created", extra={"contact_id": contact.id})
        return ContactResponse.model_validate(contact)

    async def update_contact(self, contact_id: int, data: ContactUpdate) -> ContactResponse:
        """Replace name and email of an existing contact.

        Raises:
            NotFoundError: If no contact has this ID.
            ConflictError: If the change violates a storage constraint.
        """
        contact = await self._get_or_raise(contact_id)
        contact.name = data.name
        contact.email = data.email
        try:
            contact = await self._repo.update(contact)
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise self._conflict(e) from e

        logger.info("Contact updated", extra={"contact_id": contact_id})
        return ContactResponse.model_validate(contact)

    async def delete_contact(self, contact_id: int) -> ContactResponse:
        """Delete a contact and return its last representation.

        Raises:
            NotFoundError: If no contact has this ID.
        """
        contact = await self._get_or_raise(contact_id)
        snapshot = ContactResponse.model_validate(contact)

        await self._repo.delete(contact)
        await self._session.commit()

        logger.info("Contact deleted", extra={"contact_id": contact_id})
        return snapshot

    async def _get_or_raise(self, contact_id: int) -> Contact:
        contact = await self._repo.get_by_id(contact_id)
        if contact is None:
            raise NotFoundError(
                f"Contact {contact_id} not found",
                details={"contact_id": contact_id},
            )
        return contact

    @staticmethod
    def _conflict(error: IntegrityError) -> ConflictError:
        logger.warning("Contact write rejected by database", extra={"error": str(error.orig)})
        return ConflictError("Contact conflicts with existing data")
