from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import StoreUnavailableError
from ..schemas import HomeStats, IncomePage, ExpensesPage, YearlySeries, CategoryPie
from ..services.stats_service import StatsService
from .deps import get_current_user_id

router = APIRouter()


@router.get("/home", response_model=HomeStats)
def home_stats(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Dashboard figures for the current month."""
    try:
        return StatsService(db).compute_home_stats(user_id)
    except StoreUnavailableError as e:
        return e.fallback


@router.get("/income", response_model=IncomePage)
def income_page(
    page: int = Query(0),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return StatsService(db).compute_income_page(user_id, page)
    except StoreUnavailableError as e:
        return e.fallback


@router.get("/expenses", response_model=ExpensesPage)
def expenses_page(
    page: int = Query(0),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        return StatsService(db).compute_expenses_page(user_id, page)
    except StoreUnavailableError as e:
        return e.fallback


@router.get("/yearly/expenses", response_model=YearlySeries)
def yearly_expenses(
    year: int | None = Query(None),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Monthly expense totals for a year (defaults to the current year)."""
    try:
        return StatsService(db).yearly_expense_series(user_id, year)
    except StoreUnavailableError as e:
        return e.fallback


@router.get("/yearly/income", response_model=YearlySeries)
def yearly_income(
    year: int | None = Query(None),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Monthly income totals for a year (defaults to the current year)."""
    try:
        return StatsService(db).yearly_income_series(user_id, year)
    except StoreUnavailableError as e:
        return e.fallback


@router.get("/category-pie", response_model=CategoryPie)
def category_pie(
    month: int = Query(..., ge=1, le=12),
    year: int | None = Query(None),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Expense split by category for one month."""
    try:
        return StatsService(db).category_pie(user_id, month, year)
    except StoreUnavailableError as e:
        return e.fallback
