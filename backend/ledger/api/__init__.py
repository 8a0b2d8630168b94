from fastapi import APIRouter

from .users import router as users_router
from .transactions import router as transactions_router
from .budgets import router as budgets_router
from .categories import router as categories_router
from .stats import router as stats_router

api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(budgets_router, prefix="/budgets", tags=["budgets"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(stats_router, prefix="/stats", tags=["stats"])
