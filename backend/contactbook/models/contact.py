"""Contact ORM — the single persisted entity.

Invariants:
    - id is an INTEGER PRIMARY KEY AUTOINCREMENT: assigned by the store,
      increasing in insertion order, never reused after a delete
    - name, email, phone are NOT NULL text
    - email is UNIQUE, enforced by the store so concurrent inserts with the
      same email cannot both commit

Design Decisions:
    - sqlite_autoincrement on the table: matches the persisted schema
      contacts(id INTEGER PRIMARY KEY AUTOINCREMENT, ...)
    - Text over String(n): no length limits server-side
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from contactbook.db.base import Base


class Contact(Base):
    """A name/email/phone record."""
    __tablename__ = "contacts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"Contact(id={self.id!r}, name={self.name!r}, email={self.email!r})"
