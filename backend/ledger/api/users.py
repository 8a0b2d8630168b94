from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import DuplicateUserError, InvalidCredentialsError
from ..schemas import UserCreate, LoginRequest, UserResponse
from ..services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
def register(data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    service = UserService(db)
    try:
        user = service.register(
            username=data.username,
            name=data.name,
            email=data.email,
            password=data.password,
        )
    except DuplicateUserError as e:
        raise HTTPException(status_code=409, detail=str(e))
    db.refresh(user)
    return user


@router.post("/login", response_model=UserResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Check credentials and return the matching user."""
    service = UserService(db)
    try:
        return service.authenticate(data.username, data.password)
    except InvalidCredentialsError:
        raise HTTPException(status_code=401, detail="Invalid username or password")
