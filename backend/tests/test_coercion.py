from datetime import date, datetime

import pytest

from ledger.services.coercion import (
    MAX_AMOUNT_CENTS,
    coerce_amount_cents,
    coerce_category,
    resolve_entry_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("7", 7),
        (7, 7),
        ("12abc", 12),
        (3.9, 3),
        ("  4", 4),
        ("", 0),
        (None, 0),
        ("food", 0),
        ("NaN", 0),
        ("-3", 0),
    ],
)
def test_coerce_category(value, expected) -> None:
    assert coerce_category(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12.50", 1250),
        (500, 50000),
        (19.99, 1999),
        ("0.005", 1),
        ("", 0),
        (None, 0),
        ("abc", 0),
        ("NaN", 0),
        ("inf", 0),
        ("-20", 0),
        ("92233720368547758.07", MAX_AMOUNT_CENTS),
        ("92233720368547758.08", 0),
        ("1e20", 0),
        ("1e30", 0),
        ("1e400", 0),
        (1e300, 0),
    ],
)
def test_coerce_amount_cents(value, expected) -> None:
    assert coerce_amount_cents(value) == expected


NOW = datetime(2025, 6, 18, 14, 30)


def test_explicit_date_wins() -> None:
    assert resolve_entry_date("2025-02-03", "2025-04", now=NOW) == date(2025, 2, 3)


def test_month_maps_to_first_day() -> None:
    assert resolve_entry_date(None, "2025-04", now=NOW) == date(2025, 4, 1)


def test_invalid_date_falls_back_to_now() -> None:
    assert resolve_entry_date("2025-13-40", None, now=NOW) == date(2025, 6, 18)


def test_wrong_format_is_treated_as_missing() -> None:
    assert resolve_entry_date("03/02/2025", "2025-4", now=NOW) == date(2025, 6, 18)


def test_invalid_date_with_valid_month_uses_month() -> None:
    assert resolve_entry_date("2025-02-30", "2024-12", now=NOW) == date(2024, 12, 1)
