"""
Contact repository for database operations.
"""

from typing import Protocol, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.contacts.models import Contact


class ContactRepositoryProtocol(Protocol):
    """Protocol for contact repository operations."""

    async def count(self) -> int:
        """Count all contacts."""
        ...

    async def list_page(self, offset: int, limit: int) -> Sequence[Contact]:
        """Get one slice of contacts in storage order."""
        ...

    async def get_by_id(self, contact_id: int) -> Contact | None:
        """Get a contact by ID."""
        ...

    async def create(self, contact: Contact) -> Contact:
        """Create a single contact."""
        ...

    async def update(self, contact: Contact) -> Contact:
        """Persist changes made to an attached contact."""
        ...

    async def delete(self, contact: Contact) -> None:
        """Remove a contact."""
        ...


class ContactRepository:
    """Repository for contact database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session.
        """
        self._session = session

    async def count(self) -> int:
        """Count all contacts.

        Returns:
            Number of stored contacts.
        """
        result = await self._session.execute(select(func.count(Contact.id)))
        count = result.scalar()
        return count if count is not None else 0

    async def list_page(self, offset: int, limit: int) -> Sequence[Contact]:
        """Get contacts ordered by ID.

        Args:
            offset: Number of rows to skip.
            limit: Maximum number of rows to return.

        Returns:
            Contacts in the requested window, possibly empty.
        """
        stmt = select(Contact).order_by(Contact.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def get_by_id(self, contact_id: int) -> Contact | None:
        """Get a contact by ID.

        Args:
            contact_id: Contact ID.

        Returns:
            Contact if found, None otherwise.
        """
        stmt = select(Contact).where(Contact.id == contact_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, contact: Contact) -> Contact:
        """Create a single contact.

        Args:
            contact: Contact to create.

        Returns:
            Created contact with ID.
        """
        self._session.add(contact)
        await self._session.flush()
        await self._session.refresh(contact)
        return contact

    async def update(self, contact: Contact) -> Contact:
        """Flush pending changes on an attached contact."""
        await self._session.flush()
        await self._session.refresh(contact)
        return contact

    async def delete(self, contact: Contact) -> None:
        """Delete a contact row."""
        await self._session.delete(contact)
        await self._session.flush()
