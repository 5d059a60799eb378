"""Presence Validation — required-field checks for contact creation.

Invariants:
    - A field is present only if it is not None and not the empty string
    - Whitespace-only values count as present (no trimming)
    - No format rules for email or phone; clients validate those themselves
    - A parsed contact id always fits the store's signed 64-bit INTEGER

Design Decisions:
    - Checked in core rather than as pydantic constraints so the 400 body is
      the single "Name, email, and phone are required." message
"""

from typing import Mapping

from contactbook.core.domain_types import (
    MAX_SQL_INTEGER, MIN_SQL_INTEGER, REQUIRED_FIELDS,
)
from contactbook.core.errors import MissingFieldsError


def missing_fields(values: Mapping[str, str | None]) -> list[str]:
    """Return required field names that are absent or empty, in canonical order."""
    return [name for name in REQUIRED_FIELDS if not values.get(name)]


def check_contact_fields(values: Mapping[str, str | None]) -> None:
    """Raise MissingFieldsError if any required field is absent or empty."""
    missing = missing_fields(values)
    if missing:
        raise MissingFieldsError(missing)


def parse_contact_id(raw: str) -> int | None:
    """Return raw as a contact id, or None if it cannot name a stored contact."""
    try:
        value = int(raw)
    except ValueError:
        return None
    if not MIN_SQL_INTEGER <= value <= MAX_SQL_INTEGER:
        return None
    return value
