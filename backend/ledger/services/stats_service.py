"""
View-level statistics built from LedgerService aggregates.

Each method returns the complete payload for one screen or chart. When the
store fails, the error is logged and re-raised as StoreUnavailableError
carrying the same payload shape filled with zeros, so callers never see a
half-computed result.
"""

import logging
from datetime import date, datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from ..categories import category_label
from ..exceptions import StoreUnavailableError
from ..models import Transaction, TransactionType
from .ledger_service import LedgerService
from .periods import resolve_month

logger = logging.getLogger(__name__)

TOP_CATEGORY_LIMIT = 3


def _transaction_row(tx: Transaction) -> dict:
    return {
        "id": tx.id,
        "posted_date": tx.posted_date,
        "amount_cents": tx.amount_cents,
        "transaction_type": tx.transaction_type,
        "description": tx.description,
        "category_id": tx.category_id,
        "category_name": category_label(tx.category_id) if tx.category_id is not None else None,
    }


def _category_rows(breakdown: list[dict]) -> list[dict]:
    return [
        {
            "category_id": item["category_id"],
            "category_name": category_label(item["category_id"]),
            "total_cents": item["total_cents"],
        }
        for item in breakdown
    ]


class StatsService:
    def __init__(self, db: Session, now: date | datetime | None = None):
        self.db = db
        self.ledger = LedgerService(db)
        self.now = now

    def _reference(self) -> date | datetime:
        return self.now if self.now is not None else datetime.now()

    def _fail(self, view: str, fallback: dict, exc: SQLAlchemyError):
        logger.exception("Store query failed while building %s", view)
        self.db.rollback()
        raise StoreUnavailableError(f"Could not load {view}", fallback={**fallback, "degraded": True}) from exc

    def compute_home_stats(self, user_id: int) -> dict:
        """Current month expenses, budget, what's left, and the top categories."""
        period = resolve_month(0, now=self._reference())
        result = {
            "period_label": period.label,
            "monthly_expenses": 0,
            "monthly_budget": 0,
            "monthly_remaining": 0,
            "top_categories": [],
            "degraded": False,
        }
        try:
            expenses = self.ledger.monthly_expenses(user_id, period.month, period.year)
            budget = self.ledger.monthly_budget_total(user_id, period.period_key)
            top = self.ledger.category_breakdown(
                user_id, period.month, period.year, limit=TOP_CATEGORY_LIMIT
            )
        except SQLAlchemyError as exc:
            self._fail("home stats", result, exc)

        result.update(
            monthly_expenses=expenses,
            monthly_budget=budget,
            monthly_remaining=budget - expenses,
            top_categories=_category_rows(top),
        )
        return result

    def compute_income_page(self, user_id: int, page: int = 0) -> dict:
        period = resolve_month(page, now=self._reference())
        result = {
            "period_label": period.label,
            "period_key": period.period_key,
            "transactions": [],
            "current_budget": 0,
            "this_month_budget": 0,
            "this_month_income": 0,
            "degraded": False,
        }
        try:
            transactions = self.ledger.list_transactions(
                user_id, TransactionType.INCOME, period.month, period.year
            )
            balance = self.ledger.lifetime_balance(user_id)
            budget = self.ledger.monthly_budget_total(user_id, period.period_key)
            income = self.ledger.monthly_income(user_id, period.month, period.year)
        except SQLAlchemyError as exc:
            self._fail("income page", result, exc)

        result.update(
            transactions=[_transaction_row(tx) for tx in transactions],
            current_budget=balance,
            this_month_budget=budget,
            this_month_income=income,
        )
        return result

    def compute_expenses_page(self, user_id: int, page: int = 0) -> dict:
        period = resolve_month(page, now=self._reference())
        result = {
            "period_label": period.label,
            "period_key": period.period_key,
            "transactions": [],
            "current_budget": 0,
            "this_month_expenses": 0,
            "this_month_income": 0,
            "by_category_list": [],
            "total_monthly_budget": 0,
            "degraded": False,
        }
        try:
            transactions = self.ledger.list_transactions(
                user_id, TransactionType.EXPENSE, period.month, period.year
            )
            balance = self.ledger.lifetime_balance(user_id)
            expenses = self.ledger.monthly_expenses(user_id, period.month, period.year)
            income = self.ledger.monthly_income(user_id, period.month, period.year)
            by_category = self.ledger.category_breakdown(user_id, period.month, period.year)
            budget = self.ledger.monthly_budget_total(user_id, period.period_key)
        except SQLAlchemyError as exc:
            self._fail("expenses page", result, exc)

        result.update(
            transactions=[_transaction_row(tx) for tx in transactions],
            current_budget=balance,
            this_month_expenses=expenses,
            this_month_income=income,
            by_category_list=_category_rows(by_category),
            total_monthly_budget=budget,
        )
        return result

    def _yearly(self, user_id: int, year: int | None, kind: TransactionType) -> dict:
        if year is None:
            year = self._reference().year
        result = {"year": year, "totals": [0] * 12, "degraded": False}
        try:
            totals = self.ledger.yearly_series(user_id, year, kind)
        except SQLAlchemyError as exc:
            self._fail(f"yearly {kind.value} series", result, exc)

        result["totals"] = totals
        return result

    def yearly_expense_series(self, user_id: int, year: int | None = None) -> dict:
        return self._yearly(user_id, year, TransactionType.EXPENSE)

    def yearly_income_series(self, user_id: int, year: int | None = None) -> dict:
        return self._yearly(user_id, year, TransactionType.INCOME)

    def category_pie(self, user_id: int, month: int, year: int | None = None) -> dict:
        """Expense totals per category for one month, as parallel chart lists."""
        if year is None:
            year = self._reference().year
        result = {
            "month": month,
            "year": year,
            "category_ids": [],
            "labels": [],
            "totals": [],
            "degraded": False,
        }
        try:
            breakdown = self.ledger.category_breakdown(user_id, month, year)
        except SQLAlchemyError as exc:
            self._fail("category pie", result, exc)

        result.update(
            category_ids=[item["category_id"] for item in breakdown],
            labels=[category_label(item["category_id"]) for item in breakdown],
            totals=[item["total_cents"] for item in breakdown],
        )
        return result
