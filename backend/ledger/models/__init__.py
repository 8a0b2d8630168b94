from .base import Base, TimestampMixin
from .user import User
from .transaction import Transaction, TransactionType
from .budget import Budget

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Transaction",
    "TransactionType",
    "Budget",
]
