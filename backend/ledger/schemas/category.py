from pydantic import BaseModel


class CategoryResponse(BaseModel):
    """An entry in the static category table."""
    id: int
    name: str
