"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async in Protocol: implementations do IO
"""

from typing import Protocol, Sequence

from contactbook.core.domain_types import ContactId


class ContactLike(Protocol):
    """Structural contract for contact rows returned by a repository."""
    id: int
    name: str
    email: str
    phone: str


class ContactRepository(Protocol):
    """Contract for contact persistence — implemented by shell.

    insert raises DuplicateEmailError when the email is taken and
    StorageError for any other failure. delete_by_id returns the number of
    rows removed (0 or 1); a missing id is not an error at this layer.
    """
    async def insert(self, name: str, email: str, phone: str) -> ContactLike: ...
    async def count_all(self) -> int: ...
    async def list_page(self, limit: int, offset: int) -> Sequence[ContactLike]: ...
    async def delete_by_id(self, contact_id: ContactId) -> int: ...
