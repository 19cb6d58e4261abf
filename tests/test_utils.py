"""Date helper and request-parameter parsing tests."""

from datetime import date

import pytest

from spendwise.api.deps import parse_identifier, resolve_user_id
from spendwise.config import settings
from spendwise.core.exceptions import InvalidIdentifierError
from spendwise.utils.dates import MONTH_NAMES, month_bounds, month_name, shift_months


def test_month_names_are_one_indexed():
    assert len(MONTH_NAMES) == 13
    assert MONTH_NAMES[0] == ""
    assert month_name(1) == "Jan"
    assert month_name(12) == "Dec"


@pytest.mark.parametrize(
    "year, month, expected",
    [
        (2025, 1, (date(2025, 1, 1), date(2025, 1, 31))),
        (2024, 2, (date(2024, 2, 1), date(2024, 2, 29))),
        (2025, 2, (date(2025, 2, 1), date(2025, 2, 28))),
        (2025, 12, (date(2025, 12, 1), date(2025, 12, 31))),
    ],
)
def test_month_bounds(year, month, expected):
    assert month_bounds(year, month) == expected


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2025, 6, 15), -6, date(2024, 12, 15)),
        (date(2025, 1, 10), -1, date(2024, 12, 10)),
        (date(2024, 3, 31), -1, date(2024, 2, 29)),
        (date(2025, 5, 31), 1, date(2025, 6, 30)),
        (date(2025, 6, 15), 0, date(2025, 6, 15)),
    ],
)
def test_shift_months(start, months, expected):
    assert shift_months(start, months) == expected


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("2147483647", 2**31 - 1)])
def test_parse_identifier_accepts_positive_integers(raw, expected):
    assert parse_identifier(raw, "transaction") == expected


@pytest.mark.parametrize(
    "raw", ["", "0", "007", "-3", "abc", "1e3", " 1", "2147483648", "9999999999", "9223372036854775808"]
)
def test_parse_identifier_rejects_malformed(raw):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_identifier(raw, "budget")
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Invalid budget ID"


def test_resolve_user_id_falls_back_to_configured_default():
    assert resolve_user_id(None) == settings.default_user_id
    assert resolve_user_id("   ") == settings.default_user_id
    assert resolve_user_id(" alice ") == "alice"
