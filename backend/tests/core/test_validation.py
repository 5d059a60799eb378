"""Presence Validation — required fields for contact creation."""

import pytest

from contactbook.core.domain_types import MAX_SQL_INTEGER, MIN_SQL_INTEGER
from contactbook.core.errors import MissingFieldsError
from contactbook.core.validation import (
    check_contact_fields, missing_fields, parse_contact_id,
)

VALID = {"name": "Ada", "email": "ada@example.com", "phone": "5551234567"}


def test_complete_contact_has_no_missing_fields():
    assert missing_fields(VALID) == []
    check_contact_fields(VALID)


@pytest.mark.parametrize("field", ["name", "email", "phone"])
def test_empty_string_counts_as_missing(field):
    values = {**VALID, field: ""}
    assert missing_fields(values) == [field]


@pytest.mark.parametrize("field", ["name", "email", "phone"])
def test_none_and_absent_count_as_missing(field):
    assert missing_fields({**VALID, field: None}) == [field]
    values = dict(VALID)
    del values[field]
    assert missing_fields(values) == [field]


def test_whitespace_is_present():
    assert missing_fields({**VALID, "name": "   "}) == []


def test_no_format_rules_on_email_or_phone():
    check_contact_fields({"name": "X", "email": "not-an-email", "phone": "12"})


def test_check_raises_with_all_missing_fields_listed():
    with pytest.raises(MissingFieldsError) as info:
        check_contact_fields({})
    assert info.value.missing == ["name", "email", "phone"]
    assert info.value.http_status == 400


def test_parse_contact_id():
    assert parse_contact_id("42") == 42
    assert parse_contact_id("abc") is None
    assert parse_contact_id("1.5") is None


def test_parse_contact_id_rejects_values_outside_sql_integer():
    assert parse_contact_id("9" * 20) is None
    assert parse_contact_id(str(MAX_SQL_INTEGER + 1)) is None
    assert parse_contact_id(str(MIN_SQL_INTEGER - 1)) is None
    assert parse_contact_id("9" * 5000) is None


def test_parse_contact_id_keeps_range_edges():
    assert parse_contact_id(str(MAX_SQL_INTEGER)) == MAX_SQL_INTEGER
    assert parse_contact_id(str(MIN_SQL_INTEGER)) == MIN_SQL_INTEGER
