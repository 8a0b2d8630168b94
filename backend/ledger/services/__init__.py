from .periods import MonthPeriod, resolve_month, period_key, parse_period_key
from .coercion import coerce_amount_cents, coerce_category, resolve_entry_date
from .ledger_service import LedgerService
from .budget_service import BudgetService
from .transaction_service import TransactionService
from .user_service import UserService
from .stats_service import StatsService

__all__ = [
    "MonthPeriod",
    "resolve_month",
    "period_key",
    "parse_period_key",
    "coerce_amount_cents",
    "coerce_category",
    "resolve_entry_date",
    "LedgerService",
    "BudgetService",
    "TransactionService",
    "UserService",
    "StatsService",
]
