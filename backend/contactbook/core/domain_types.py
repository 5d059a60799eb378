"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ContactId wraps the store-assigned integer id — immutable once assigned
    - Page is a 1-based page number, Limit a page size; both always >= 1
    - Every id, limit and offset handed to the store fits MIN_SQL_INTEGER..MAX_SQL_INTEGER
    - REQUIRED_FIELDS order drives validation messages and response shape

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ContactId = NewType("ContactId", int)


# ─── Value Types ─────────────────────────────────────────────────

Page = NewType("Page", int)     # >= 1
Limit = NewType("Limit", int)   # >= 1

# Signed 64-bit range of an SQL INTEGER column
MIN_SQL_INTEGER = -(2**63)
MAX_SQL_INTEGER = 2**63 - 1

DEFAULT_PAGE = Page(1)
DEFAULT_LIMIT = Limit(10)

REQUIRED_FIELDS = ("name", "email", "phone")


@dataclass(frozen=True)
class PageRequest:
    """A resolved pagination request."""
    page: Page
    limit: Limit

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
