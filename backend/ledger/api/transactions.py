from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import TransactionType
from ..schemas import TransactionCreate, TransactionResponse
from ..services.ledger_service import LedgerService
from ..services.periods import resolve_month
from ..services.transaction_service import TransactionService
from .deps import get_current_user_id

router = APIRouter()


@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    type: TransactionType = Query(TransactionType.EXPENSE),
    page: int = Query(0),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Get one month of transactions of a single type.

    page counts months back from the current month (0 = this month).
    """
    period = resolve_month(page)
    service = LedgerService(db)
    return service.list_transactions(user_id, type, period.month, period.year)


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Record a new income or expense."""
    service = TransactionService(db)
    return service.create_transaction(
        user_id=user_id,
        kind=data.transaction_type,
        amount=data.amount,
        description=data.description,
        category=data.category,
        date_value=data.date,
        month_value=data.month,
    )
