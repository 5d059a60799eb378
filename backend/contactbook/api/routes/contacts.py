"""Contacts — create, paginated list and delete over the ContactRepository.

Invariants:
    - Create checks presence of name, email, phone before any storage access
    - Each request performs its storage calls and returns one JSON response;
      nothing is retried
    - Storage failures surface as 500 with an operation-specific message;
      duplicate email as 409; delete of an unknown id as 404
    - List issues count then page as two reads; totalPages = ceil(total / limit)

Design Decisions:
    - Repository injected via Depends(get_contact_repository), never imported
      as a global, so route tests can run against a double
    - storage_failure() relabels StorageError for the client while the
      original detail stays in the server log
"""

from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, Query, Response, status

from contactbook.api.dependencies import get_app_settings, get_contact_repository
from contactbook.config import Settings
from contactbook.core.domain_types import ContactId
from contactbook.core.errors import ContactNotFoundError, StorageError
from contactbook.core.pagination import resolve_page_request, total_pages
from contactbook.core.repository_protocols import ContactRepository
from contactbook.core.validation import check_contact_fields, parse_contact_id
from contactbook.schemas.contact import (
    ContactCreate, ContactListResponse, ContactResponse, ErrorResponse,
)

router = APIRouter(prefix="/contacts", tags=["contacts"])


@contextmanager
def storage_failure(message: str) -> Iterator[None]:
    """Give any StorageError raised inside the block a client-facing message."""
    try:
        yield
    except StorageError as e:
        e.context.user_message = message
        raise


@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_contact(
    body: ContactCreate | None = None,
    repo: ContactRepository = Depends(get_contact_repository),
):
    """Create a contact. The store assigns the id."""
    fields = body.model_dump() if body else {}
    check_contact_fields(fields)
    with storage_failure("Failed to add contact."):
        contact = await repo.insert(
            fields["name"], fields["email"], fields["phone"],
        )
    return ContactResponse.model_validate(contact)


@router.get(
    "",
    response_model=ContactListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_contacts(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    settings: Settings = Depends(get_app_settings),
    repo: ContactRepository = Depends(get_contact_repository),
):
    """List contacts ordered by name, one page at a time."""
    page_request = resolve_page_request(
        page, limit, default_limit=settings.default_page_limit,
    )
    with storage_failure("Failed to fetch total count."):
        total = await repo.count_all()
    with storage_failure("Failed to fetch contacts."):
        contacts = await repo.list_page(page_request.limit, page_request.offset)
    return ContactListResponse(
        contacts=[ContactResponse.model_validate(c) for c in contacts],
        total=total,
        page=page_request.page,
        limit=page_request.limit,
        total_pages=total_pages(total, page_request.limit),
    )


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_contact(
    contact_id: str,
    repo: ContactRepository = Depends(get_contact_repository),
):
    """Delete a contact by id."""
    parsed = parse_contact_id(contact_id)
    if parsed is None:
        raise ContactNotFoundError(contact_id)
    with storage_failure("Failed to delete contact."):
        deleted = await repo.delete_by_id(ContactId(parsed))
    if deleted == 0:
        raise ContactNotFoundError(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
