"""Pagination — query parameter parsing and page arithmetic for contact listings.

Invariants:
    - Malformed pagination parameters never raise; they fall back to defaults
    - Resolved page and limit are always >= 1, so offsets are never negative
    - Resolved limit and offset never exceed MAX_SQL_INTEGER
    - total_pages(0, limit) == 0 and total_pages(n, limit) == ceil(n / limit)

Design Decisions:
    - Integer-prefix parsing ("2abc" -> 2, " 3" -> 3, "1.9" -> 1) so clients
      sending loosely formatted query strings keep working
    - Zero and negative values fall back to the default instead of producing
      a negative OFFSET, whose meaning differs between stores
"""

import re

from contactbook.core.domain_types import (
    DEFAULT_LIMIT, DEFAULT_PAGE, MAX_SQL_INTEGER, Limit, Page, PageRequest,
)

_INT_PREFIX = re.compile(r"^\s*([+-]?)(\d+)")
_MAX_DIGITS = len(str(MAX_SQL_INTEGER))


def parse_int_prefix(raw: str | None) -> int | None:
    """Parse the leading integer of raw, or None when there is none.

    Magnitudes with more digits than MAX_SQL_INTEGER saturate to
    MAX_SQL_INTEGER + 1, so arbitrarily long input never reaches int().
    """
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    sign, digits = match.group(1), match.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        value = MAX_SQL_INTEGER + 1
    else:
        value = int(digits)
    return -value if sign == "-" else value


def parse_positive(raw: str | None, default: int) -> int:
    value = parse_int_prefix(raw)
    if value is None or value < 1:
        return default
    return value


def resolve_page_request(
    page: str | None,
    limit: str | None,
    default_limit: int = DEFAULT_LIMIT,
) -> PageRequest:
    """Turn raw ?page=&limit= values into a PageRequest.

    limit is capped at MAX_SQL_INTEGER and page so that the offset
    (page - 1) * limit is too; a capped page lies past the last row.
    """
    resolved_limit = min(parse_positive(limit, default_limit), MAX_SQL_INTEGER)
    resolved_page = min(
        parse_positive(page, DEFAULT_PAGE),
        MAX_SQL_INTEGER // resolved_limit + 1,
    )
    return PageRequest(page=Page(resolved_page), limit=Limit(resolved_limit))


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show total items, limit per page."""
    return -(-total // limit)
