from sqlalchemy.orm import Session
from sqlalchemy import func, extract, case

from ..models import Transaction, TransactionType, Budget
from .periods import parse_period_key


class LedgerService:
    """
    Aggregate figures over a user's transactions and budgets.

    Every total is in integer cents and every aggregation over zero rows
    returns 0 (or a list of zeros), never None.
    """

    def __init__(self, db: Session):
        self.db = db

    def _month_filter(self, query, month: int, year: int):
        return query.filter(
            extract("year", Transaction.posted_date) == year,
            extract("month", Transaction.posted_date) == month,
        )

    def _sum_for_month(self, user_id: int, kind: TransactionType, month: int, year: int) -> int:
        query = self.db.query(
            func.coalesce(func.sum(Transaction.amount_cents), 0)
        ).filter(
            Transaction.user_id == user_id,
            Transaction.transaction_type == kind,
        )
        return int(self._month_filter(query, month, year).scalar() or 0)

    def monthly_income(self, user_id: int, month: int, year: int) -> int:
        return self._sum_for_month(user_id, TransactionType.INCOME, month, year)

    def monthly_expenses(self, user_id: int, month: int, year: int) -> int:
        return self._sum_for_month(user_id, TransactionType.EXPENSE, month, year)

    def lifetime_balance(self, user_id: int) -> int:
        """All-time income minus all-time expenses."""
        signed = case(
            (Transaction.transaction_type == TransactionType.INCOME, Transaction.amount_cents),
            else_=-Transaction.amount_cents,
        )
        result = self.db.query(func.coalesce(func.sum(signed), 0)).filter(
            Transaction.user_id == user_id
        ).scalar()
        return int(result or 0)

    def monthly_budget_total(self, user_id: int, period_key: str) -> int:
        result = self.db.query(func.coalesce(func.sum(Budget.amount_cents), 0)).filter(
            Budget.user_id == user_id,
            Budget.period_key == period_key,
        ).scalar()
        return int(result or 0)

    def remaining(self, user_id: int, period_key: str) -> int:
        """Budget left for the period. Negative when spending exceeds the budget."""
        period = parse_period_key(period_key)
        if period is None:
            raise ValueError(f"Invalid period key: {period_key!r}")
        budget = self.monthly_budget_total(user_id, period_key)
        return budget - self.monthly_expenses(user_id, period.month, period.year)

    def category_breakdown(
        self,
        user_id: int,
        month: int,
        year: int,
        kind: TransactionType = TransactionType.EXPENSE,
        limit: int | None = None,
    ) -> list[dict]:
        """
        Totals per category for one month, largest first.

        Ties are ordered by ascending category id so the result is stable.
        Category ids unknown to the label table are returned unchanged.
        """
        total = func.sum(Transaction.amount_cents).label("total_cents")
        query = self._month_filter(
            self.db.query(Transaction.category_id, total).filter(
                Transaction.user_id == user_id,
                Transaction.transaction_type == kind,
            ),
            month,
            year,
        )
        query = query.group_by(Transaction.category_id).order_by(
            total.desc(), Transaction.category_id.asc()
        )
        if limit is not None:
            query = query.limit(limit)

        return [
            {"category_id": row.category_id, "total_cents": int(row.total_cents or 0)}
            for row in query.all()
        ]

    def yearly_series(self, user_id: int, year: int, kind: TransactionType) -> list[int]:
        """Twelve monthly totals for a year; index 0 is January."""
        month_col = extract("month", Transaction.posted_date)
        rows = (
            self.db.query(
                month_col.label("month"),
                func.sum(Transaction.amount_cents).label("total_cents"),
            )
            .filter(
                Transaction.user_id == user_id,
                Transaction.transaction_type == kind,
                extract("year", Transaction.posted_date) == year,
            )
            .group_by(month_col)
            .all()
        )

        series = [0] * 12
        for row in rows:
            series[int(row.month) - 1] = int(row.total_cents or 0)
        return series

    def list_transactions(
        self, user_id: int, kind: TransactionType, month: int, year: int
    ) -> list[Transaction]:
        """A month's transactions of one type, newest first."""
        query = self.db.query(Transaction).filter(
            Transaction.user_id == user_id,
            Transaction.transaction_type == kind,
        )
        return self._month_filter(query, month, year).order_by(
            Transaction.posted_date.desc(),
            Transaction.id.desc(),
        ).all()
