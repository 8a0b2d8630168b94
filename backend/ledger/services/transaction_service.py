import logging
from datetime import date, datetime
from sqlalchemy.orm import Session

from ..models import Transaction, TransactionType
from .coercion import coerce_amount_cents, coerce_category, resolve_entry_date

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(self, db: Session):
        self.db = db

    def create_transaction(
        self,
        user_id: int,
        kind: TransactionType,
        amount,
        description: str | None = None,
        category=None,
        date_value: str | None = None,
        month_value: str | None = None,
        now: date | datetime | None = None,
    ) -> Transaction:
        """
        Record a new income or expense entry.

        The posting date comes from date_value ("YYYY-MM-DD"), else
        month_value ("YYYY-MM", pinned to the 1st), else now. Malformed values
        are treated as missing. Expenses always get a category (0 when
        unparseable); income never stores one.
        """
        posted_date = resolve_entry_date(date_value, month_value, now=now)
        category_id = coerce_category(category) if kind == TransactionType.EXPENSE else None

        transaction = Transaction(
            user_id=user_id,
            posted_date=posted_date,
            amount_cents=coerce_amount_cents(amount),
            transaction_type=kind,
            description=(description or "").strip(),
            category_id=category_id,
        )
        self.db.add(transaction)
        self.db.flush()
        self.db.refresh(transaction)

        logger.info(
            "Recorded %s id=%s user=%s date=%s amount_cents=%s",
            kind.value, transaction.id, user_id, posted_date, transaction.amount_cents,
        )
        return transaction
