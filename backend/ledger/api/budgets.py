from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..categories import category_label
from ..database import get_db
from ..schemas import BudgetUpsert, BudgetResponse, BudgetListResponse
from ..services.budget_service import BudgetService
from ..services.periods import parse_period_key, resolve_month
from .deps import get_current_user_id

router = APIRouter()


def _build_response(budget) -> dict:
    return {
        "id": budget.id,
        "user_id": budget.user_id,
        "period_key": budget.period_key,
        "category_id": budget.category_id,
        "category_name": category_label(budget.category_id),
        "amount_cents": budget.amount_cents,
        "description": budget.description,
        "created_at": budget.created_at,
        "updated_at": budget.updated_at,
    }


@router.get("/", response_model=BudgetListResponse)
def list_budgets(
    page: int = Query(0),
    period_key: str | None = Query(None),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get all category budgets for a month, by page offset or explicit period key."""
    if period_key is not None:
        period = parse_period_key(period_key)
        if period is None:
            raise HTTPException(status_code=400, detail="period_key must be MMYYYY")
    else:
        period = resolve_month(page)

    service = BudgetService(db)
    budgets = service.list_budgets(user_id, period.period_key)
    return {
        "period_key": period.period_key,
        "period_label": period.label,
        "total_cents": sum(b.amount_cents for b in budgets),
        "items": [_build_response(b) for b in budgets],
    }


@router.put("/", response_model=BudgetResponse)
def upsert_budget(
    data: BudgetUpsert,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Set the budget for one category and month, replacing any previous value."""
    period_key = data.period_key or resolve_month(0).period_key
    service = BudgetService(db)
    budget = service.upsert_budget(
        user_id=user_id,
        period_key=period_key,
        category=data.category,
        amount=data.amount,
        description=data.description,
    )
    return _build_response(budget)
