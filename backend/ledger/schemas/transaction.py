from datetime import date, datetime
from pydantic import BaseModel, computed_field

from ..models.transaction import TransactionType


class TransactionCreate(BaseModel):
    """
    Fields for recording a transaction.

    amount and category are accepted loosely and coerced server-side;
    date ("YYYY-MM-DD") and month ("YYYY-MM") are optional and ignored when
    malformed.
    """
    transaction_type: TransactionType
    amount: str | int | float | None = None
    description: str | None = None
    category: str | int | float | None = None
    date: str | None = None
    month: str | None = None


class TransactionResponse(BaseModel):
    """Transaction response with all fields."""
    id: int
    user_id: int
    posted_date: date
    amount_cents: int
    transaction_type: TransactionType
    description: str
    category_id: int | None = None
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def amount(self) -> float:
        """Amount in dollars."""
        return self.amount_cents / 100.0

    class Config:
        from_attributes = True
