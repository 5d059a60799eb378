"""Contact Schemas — Pydantic models for the /contacts endpoints.

Invariants:
    - ContactCreate accepts missing or null fields; presence is checked by
      core/validation.py so every omission yields the same 400 message
    - Field values are text only; no format constraints on email or phone
    - ContactListResponse mirrors {contacts, total, page, limit, totalPages}
"""

from pydantic import BaseModel, ConfigDict, Field


class ContactCreate(BaseModel):
    """Create request body — all fields optional at parse time."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class ContactResponse(BaseModel):
    """A stored contact, including its assigned id."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str


class ContactListResponse(BaseModel):
    """One page of contacts plus pagination metadata."""
    model_config = ConfigDict(populate_by_name=True)

    contacts: list[ContactResponse]
    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""
    error: str
