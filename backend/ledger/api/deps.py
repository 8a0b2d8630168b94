from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.user_service import UserService


def get_current_user_id(
    x_user_id: int | None = Header(None),
    db: Session = Depends(get_db),
) -> int:
    """
    Identity of the caller.

    Sessions are handled in front of this API; by the time a request gets
    here the user id has already been authenticated and is passed through
    the X-User-Id header. Ids that name no user are rejected.
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    if UserService(db).get_user(x_user_id) is None:
        raise HTTPException(status_code=401, detail="Unknown user")
    return x_user_id
