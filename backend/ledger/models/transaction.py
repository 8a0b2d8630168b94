import enum
from datetime import date
from sqlalchemy import String, Integer, Date, ForeignKey, Enum, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class TransactionType(enum.Enum):
    """Type of transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(Base, TimestampMixin):
    """
    A single income or expense entry in a user's ledger.

    Amounts are stored as non-negative integer cents; the direction of the
    money comes from transaction_type, never from the sign of the amount.
    category_id is only meaningful for expenses and is left NULL on income.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount_cents >= 0", name="ck_transaction_amount_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Core fields
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    posted_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)  # Stored as cents
    transaction_type: Mapped[TransactionType] = mapped_column(
        Enum(TransactionType), nullable=False
    )
    description: Mapped[str] = mapped_column(String(1000), nullable=False, default="")

    # Category id from the static category table (no FK: unknown ids are kept)
    category_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="transactions")

    @property
    def amount(self) -> float:
        """Get amount as decimal dollars."""
        return self.amount_cents / 100.0

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, date={self.posted_date}, "
            f"type={self.transaction_type.value}, amount=${self.amount:.2f})>"
        )
