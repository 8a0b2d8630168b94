from .transaction import TransactionCreate, TransactionResponse
from .budget import BudgetUpsert, BudgetResponse, BudgetListResponse
from .category import CategoryResponse
from .user import UserCreate, LoginRequest, UserResponse
from .stats import (
    CategoryTotal,
    TransactionRow,
    HomeStats,
    IncomePage,
    ExpensesPage,
    YearlySeries,
    CategoryPie,
)

__all__ = [
    "TransactionCreate",
    "TransactionResponse",
    "BudgetUpsert",
    "BudgetResponse",
    "BudgetListResponse",
    "CategoryResponse",
    "UserCreate",
    "LoginRequest",
    "UserResponse",
    "CategoryTotal",
    "TransactionRow",
    "HomeStats",
    "IncomePage",
    "ExpensesPage",
    "YearlySeries",
    "CategoryPie",
]
