"""
Pydantic schemas for the contact API.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ContactBase(_CamelModel):
    """Fields a client supplies when writing a contact."""

    name: str = Field(..., description="Contact display name", examples=["John Doe"])
    email: str = Field(
        ...,
        description="Contact email address",
        examples=["john@example.com"],
    )


class ContactCreate(ContactBase):
    """Schema for creating a contact."""

    pass


class ContactUpdate(ContactBase):
    """Schema for replacing a contact's name and email.

    Any ``id`` in the body is ignored; the path decides which contact changes.
    """

    pass


class ContactResponse(_CamelModel):
    """Schema for contact response."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {"id": 10, "name": "John Doe", "email": "john@example.com"},
        },
    )

    id: int = Field(..., description="The contact ID")
    name: str = Field(..., description="The contact name")
    email: str = Field(..., description="The contact email address")


class ContactPage(_CamelModel):
    """Pagination envelope for the contact list."""

    current_page: int = Field(..., description="The current page number")
    total_items: int = Field(..., description="Total number of items")
    page_size: int = Field(..., description="Number of items per page")
    total_pages: int = Field(..., description="Total number of pages")
    contacts: list[ContactResponse]


class ErrorDetail(BaseModel):
    """Error detail schema."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: ErrorDetail
