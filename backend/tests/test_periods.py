from datetime import date, datetime

from ledger.services.periods import MonthPeriod, parse_period_key, period_key, resolve_month


def test_current_month_is_page_zero() -> None:
    period = resolve_month(0, now=date(2024, 1, 15))
    assert (period.month, period.year) == (1, 2024)


def test_previous_month_rolls_back_the_year() -> None:
    period = resolve_month(1, now=date(2024, 1, 15))
    assert (period.month, period.year) == (12, 2023)


def test_thirteen_months_back() -> None:
    period = resolve_month(13, now=date(2024, 1, 1))
    assert (period.month, period.year) == (12, 2022)


def test_end_of_month_does_not_skip_february() -> None:
    period = resolve_month(1, now=datetime(2024, 3, 31, 23, 59))
    assert (period.month, period.year) == (2, 2024)


def test_consecutive_pages_visit_every_month_once() -> None:
    now = date(2023, 5, 31)
    seen = [(p.year, p.month) for p in (resolve_month(page, now=now) for page in range(24))]
    assert len(set(seen)) == 24
    assert seen[0] == (2023, 5)
    assert seen[-1] == (2021, 6)


def test_negative_page_clamps_to_current_month() -> None:
    assert resolve_month(-4, now=date(2024, 7, 9)) == MonthPeriod(month=7, year=2024)


def test_period_key_and_label() -> None:
    period = resolve_month(0, now=date(2025, 1, 20))
    assert period.period_key == "012025"
    assert period.label == "January 2025"
    assert period.start == date(2025, 1, 1)
    assert period_key(11, 2024) == "112024"


def test_parse_period_key() -> None:
    assert parse_period_key("092024") == MonthPeriod(month=9, year=2024)
    assert parse_period_key("132024") is None
    assert parse_period_key("2024-09") is None
    assert parse_period_key("") is None
