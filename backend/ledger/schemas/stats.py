from __future__ import annotations
from datetime import date
from pydantic import BaseModel

from ..models.transaction import TransactionType


class CategoryTotal(BaseModel):
    category_id: int | None
    category_name: str
    total_cents: int


class TransactionRow(BaseModel):
    id: int
    posted_date: date
    amount_cents: int
    transaction_type: TransactionType
    description: str
    category_id: int | None = None
    category_name: str | None = None


class HomeStats(BaseModel):
    period_label: str
    monthly_expenses: int
    monthly_budget: int
    monthly_remaining: int
    top_categories: list[CategoryTotal]
    degraded: bool = False


class IncomePage(BaseModel):
    period_label: str
    period_key: str
    transactions: list[TransactionRow]
    current_budget: int
    this_month_budget: int
    this_month_income: int
    degraded: bool = False


class ExpensesPage(BaseModel):
    period_label: str
    period_key: str
    transactions: list[TransactionRow]
    current_budget: int
    this_month_expenses: int
    this_month_income: int
    by_category_list: list[CategoryTotal]
    total_monthly_budget: int
    degraded: bool = False


class YearlySeries(BaseModel):
    year: int
    totals: list[int]
    degraded: bool = False


class CategoryPie(BaseModel):
    month: int
    year: int
    category_ids: list[int | None]
    labels: list[str]
    totals: list[int]
    degraded: bool = False
