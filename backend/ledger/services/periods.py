"""
Month resolution for paginated monthly views.

A page offset counts months back from the current month: 0 is this month,
1 is last month, and so on.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime

PERIOD_KEY_RE = re.compile(r"^(0[1-9]|1[0-2])(\d{4})$")


@dataclass(frozen=True)
class MonthPeriod:
    """A concrete calendar month."""
    month: int
    year: int

    @property
    def period_key(self) -> str:
        return period_key(self.month, self.year)

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)


def period_key(month: int, year: int) -> str:
    """Build the "MMYYYY" key for a month, e.g. (1, 2025) -> "012025"."""
    return f"{month:02d}{year:04d}"


def parse_period_key(key: str) -> MonthPeriod | None:
    """Parse an "MMYYYY" key, returning None when it is malformed."""
    match = PERIOD_KEY_RE.match(key or "")
    if not match:
        return None
    return MonthPeriod(month=int(match.group(1)), year=int(match.group(2)))


def resolve_month(page: int = 0, now: date | datetime | None = None) -> MonthPeriod:
    """
    Map a page offset to the month it refers to.

    The reference date is reduced to its month before subtracting, so the
    day of month can never cause a month to be skipped or repeated.
    Negative pages clamp to 0.
    """
    if now is None:
        now = datetime.now()
    page = max(int(page or 0), 0)

    # Months since year 0, counted from the 1st of the reference month
    index = now.year * 12 + (now.month - 1) - page
    return MonthPeriod(month=index % 12 + 1, year=index // 12)
