from datetime import datetime
from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Fields for registering a user."""
    username: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: int
    username: str
    name: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
