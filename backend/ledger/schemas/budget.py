from datetime import datetime
from pydantic import BaseModel, Field, computed_field

from ..services.periods import PERIOD_KEY_RE


class BudgetUpsert(BaseModel):
    """A budget write. period_key defaults to the current month."""
    period_key: str | None = Field(default=None, pattern=PERIOD_KEY_RE.pattern)
    category: str | int | float | None = None
    amount: str | int | float | None = None
    description: str | None = None


class BudgetResponse(BaseModel):
    id: int
    user_id: int
    period_key: str
    category_id: int
    category_name: str
    amount_cents: int
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def amount(self) -> float:
        """Amount in dollars."""
        return self.amount_cents / 100.0


class BudgetListResponse(BaseModel):
    period_key: str
    period_label: str
    total_cents: int
    items: list[BudgetResponse]
