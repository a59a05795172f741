"""
Contact API router.

Mounted under the application's API prefix (``/api`` by default).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from contacts_api.contacts.schemas import (
    ContactCreate,
    ContactPage,
    ContactResponse,
    ContactUpdate,
    ErrorResponse,
)
from contacts_api.contacts.service import ContactService
from contacts_api.shared.database import get_db_session
from contacts_api.shared.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_SQL_INT,
    MIN_SQL_INT,
    PageRequest,
)

router = APIRouter(tags=["contacts"])

ContactId = Annotated[
    int,
    Path(ge=MIN_SQL_INT, le=MAX_SQL_INT, description="Contact ID", examples=[10]),
]

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Contact not found"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Storage constraint violated"}}


def get_contact_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ContactService:
    """Dependency for contact service."""
    return ContactService(session=session)


def get_page_request(
    page: Annotated[
        int,
        Query(ge=1, le=MAX_SQL_INT, description="Page number (1-indexed)"),
    ] = DEFAULT_PAGE,
    page_size: Annotated[
        int,
        Query(alias="pageSize", ge=1, le=MAX_SQL_INT, description="Number of items per page"),
    ] = DEFAULT_PAGE_SIZE,
) -> PageRequest:
    """Parse pagination query parameters."""
    return PageRequest(page=page, page_size=page_size)


@router.get(
    "/contacts",
    response_model=ContactPage,
    summary="Get paginated contacts",
    description="Retrieve paginated contacts with details",
)
async def list_contacts(
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactPage:
    return await service.list_contacts(page_request)


@router.get(
    "/contact/{contact_id}",
    response_model=ContactResponse,
    responses=_NOT_FOUND,
    summary="Get a contact by ID",
    description="Retrieve a contact by its ID",
)
async def get_contact(
    contact_id: ContactId,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    return await service.get_contact(contact_id)


@router.post(
    "/contact",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_CONFLICT,
    summary="Create a contact",
    description="Create a new contact",
)
async def create_contact(
    data: ContactCreate,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    return await service.create_contact(data)


@router.put(
    "/contact/{contact_id}",
    response_model=ContactResponse,
    responses={**_NOT_FOUND, **_CONFLICT},
    summary="Update a contact",
    description="Replace the name and email of an existing contact",
)
async def update_contact(
    contact_id: ContactId,
    data: ContactUpdate,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    return await service.update_contact(contact_id, data)


@router.delete(
    "/contact/{contact_id}",
    response_model=ContactResponse,
    responses=_NOT_FOUND,
    summary="Delete a contact",
    description="Delete a contact and return its last representation",
)
async def delete_contact(
    contact_id: ContactId,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactResponse:
    return await service.delete_contact(contact_id)
