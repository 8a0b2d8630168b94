from sqlalchemy import String, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class Budget(Base, TimestampMixin):
    """
    A monthly spending target for one category.

    period_key is the six character "MMYYYY" month identifier. There is at
    most one row per (user, period, category); writes replace the amount.
    """

    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("user_id", "period_key", "category_id", name="uq_budget_user_period_category"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    period_key: Mapped[str] = mapped_column(String(6), nullable=False)
    category_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="budgets")

    @property
    def amount(self) -> float:
        """Get amount as decimal dollars."""
        return self.amount_cents / 100.0

    def __repr__(self) -> str:
        return (
            f"<Budget(user={self.user_id}, period={self.period_key}, "
            f"category={self.category_id}, amount={self.amount_cents})>"
        )
