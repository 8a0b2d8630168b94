from fastapi import APIRouter

from ..categories import list_categories as category_table
from ..schemas import CategoryResponse

router = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
def list_categories():
    """Get the category label table."""
    return category_table()
