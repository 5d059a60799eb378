"""Contact Repository — SQLAlchemy implementation of ContactRepository.

Invariants:
    - Email uniqueness is enforced by the UNIQUE constraint, never by a
      read-then-write check, so racing inserts cannot both succeed
    - A unique violation on insert raises DuplicateEmailError; every other
      failure raises StorageError with the operation name
    - list_page orders by name, then id, so page boundaries are deterministic
    - delete_by_id reports rows affected (0 or 1) and never raises for a missing id

Design Decisions:
    - One repository per request session: commit happens inside the mutating
      call, reads share the request's session
    - count_all and list_page are separate statements without a shared
      snapshot; under concurrent writes total and page contents may disagree
"""

import logging
from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.core.domain_types import ContactId
from contactbook.core.errors import DuplicateEmailError, ErrorContext, StorageError
from contactbook.models.contact import Contact

logger = logging.getLogger(__name__)


def _is_unique_violation(exc: IntegrityError) -> bool:
    """SQLite says 'UNIQUE constraint failed', PostgreSQL 'violates unique constraint'."""
    return "unique" in str(exc.orig).lower()


class SqlContactRepository:
    """Contact persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, name: str, email: str, phone: str) -> Contact:
        contact = Contact(name=name, email=email, phone=phone)
        self._db.add(contact)
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if _is_unique_violation(e):
                logger.info(
                    "Rejected duplicate email", extra={"operation": "insert"},
                )
                raise DuplicateEmailError() from e
            logger.error(f"Insert violated a constraint: {e}")
            raise StorageError(str(e.orig), "insert") from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Insert failed: {e}", exc_info=True)
            raise StorageError(str(e), "insert") from e
        logger.info("Contact created", extra={"contact_id": contact.id})
        return contact

    async def count_all(self) -> int:
        try:
            result = await self._db.execute(
                select(func.count()).select_from(Contact),
            )
        except SQLAlchemyError as e:
            logger.error(f"Count failed: {e}", exc_info=True)
            raise StorageError(str(e), "count") from e
        return result.scalar_one()

    async def list_page(self, limit: int, offset: int) -> Sequence[Contact]:
        query = (
            select(Contact)
            .order_by(Contact.name.asc(), Contact.id.asc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self._db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"List failed: {e}", exc_info=True)
            raise StorageError(str(e), "list") from e
        return result.scalars().all()

    async def delete_by_id(self, contact_id: ContactId) -> int:
        try:
            result = await self._db.execute(
                delete(Contact).where(Contact.id == contact_id),
            )
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Delete failed: {e}", exc_info=True)
            raise StorageError(
                str(e), "delete", ErrorContext(contact_id=contact_id),
            ) from e
        if result.rowcount:
            logger.info("Contact deleted", extra={"contact_id": contact_id})
        return result.rowcount
