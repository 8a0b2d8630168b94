"""
Permissive parsing of user-entered form values.

Callers post raw strings for amounts, categories and dates. Rather than
rejecting bad input, each field is coerced to a safe default:

    category   leading optional sign + digits ("7", "7abc", 7.9 -> 7);
               None, "", non-numeric, NaN and negatives -> 0
    amount     any finite number up to MAX_AMOUNT_CENTS, rounded half-up
               to cents; None, "", non-numeric, NaN/inf, negatives and
               amounts above the ceiling -> 0
    date       "YYYY-MM-DD" naming a real day, else "YYYY-MM" naming a real
               month (pinned to the 1st), else the reference "now"
"""

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MONTH_RE = re.compile(r"^\d{4}-\d{2}$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_CENT = Decimal("0.01")

# Largest value an integer column holds on SQLite and PostgreSQL BIGINT
MAX_AMOUNT_CENTS = 2**63 - 1
_MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / 100


def coerce_category(value) -> int:
    """Parse a category id, defaulting to 0."""
    if value is None or isinstance(value, bool):
        return 0
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        logger.debug("Coercing non-numeric category %r to 0", value)
        return 0
    category = int(match.group(1))
    return category if category >= 0 else 0


def coerce_amount_cents(value) -> int:
    """Parse a money amount into non-negative integer cents, defaulting to 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        logger.debug("Coercing non-numeric amount %r to 0", value)
        return 0
    if not amount.is_finite() or amount < 0 or amount > _MAX_AMOUNT:
        logger.debug("Coercing out-of-range amount %r to 0", value)
        return 0
    try:
        cents = int((amount.quantize(_CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value())
    except InvalidOperation:
        logger.debug("Coercing unrepresentable amount %r to 0", value)
        return 0
    return cents if cents <= MAX_AMOUNT_CENTS else 0


def _parse_date(value: str | None) -> date | None:
    if not value or not DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def _parse_month(value: str | None) -> date | None:
    if not value or not MONTH_RE.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        return None


def resolve_entry_date(
    date_value: str | None = None,
    month_value: str | None = None,
    now: date | datetime | None = None,
) -> date:
    """Pick the posting date for a new entry from an explicit date, a month, or now."""
    parsed = _parse_date(date_value) or _parse_month(month_value)
    if parsed is not None:
        return parsed

    if date_value or month_value:
        logger.debug(
            "Ignoring invalid date=%r month=%r, using current date", date_value, month_value
        )
    if now is None:
        now = datetime.now()
    return now.date() if isinstance(now, datetime) else now
