import logging
from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite

from ..models import Budget
from .coercion import coerce_amount_cents, coerce_category

logger = logging.getLogger(__name__)

# Dialects with a native INSERT .. ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class BudgetService:
    def __init__(self, db: Session):
        self.db = db

    def list_budgets(self, user_id: int, period_key: str) -> list[Budget]:
        return (
            self.db.query(Budget)
            .filter(Budget.user_id == user_id, Budget.period_key == period_key)
            .order_by(Budget.category_id)
            .all()
        )

    def get_budget(self, user_id: int, period_key: str, category_id: int) -> Budget | None:
        return self.db.query(Budget).filter(
            Budget.user_id == user_id,
            Budget.period_key == period_key,
            Budget.category_id == category_id,
        ).first()

    def upsert_budget(
        self,
        user_id: int,
        period_key: str,
        category,
        amount,
        description: str | None = None,
    ) -> Budget:
        """
        Set the budget for (user, period, category), replacing any existing row.

        category and amount are coerced (non-numeric -> 0) rather than rejected.
        The replace is a single INSERT .. ON CONFLICT statement where the
        dialect supports one, so concurrent writers never create duplicates.
        """
        category_id = coerce_category(category)
        amount_cents = coerce_amount_cents(amount)

        insert = _UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
        if insert is not None:
            stmt = insert(Budget).values(
                user_id=user_id,
                period_key=period_key,
                category_id=category_id,
                amount_cents=amount_cents,
                description=description,
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=["user_id", "period_key", "category_id"],
                set_={
                    "amount_cents": stmt.excluded.amount_cents,
                    "description": stmt.excluded.description,
                    "updated_at": func.now(),
                },
            )
            self.db.execute(stmt)
        else:
            budget = self.get_budget(user_id, period_key, category_id)
            if budget:
                budget.amount_cents = amount_cents
                budget.description = description
            else:
                self.db.add(Budget(
                    user_id=user_id,
                    period_key=period_key,
                    category_id=category_id,
                    amount_cents=amount_cents,
                    description=description,
                ))
        self.db.flush()

        logger.info(
            "Set budget user=%s period=%s category=%s amount_cents=%s",
            user_id, period_key, category_id, amount_cents,
        )
        budget = self.get_budget(user_id, period_key, category_id)
        # The core statement bypasses the identity map; reload stale instances
        self.db.refresh(budget)
        return budget
