import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from ..exceptions import DuplicateUserError, InvalidCredentialsError
from ..models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def register(self, username: str, name: str, email: str, password: str) -> User:
        """Create a user, raising DuplicateUserError if username or email is taken."""
        username = username.strip()
        email = email.strip().lower()

        # Check up front so the error names the colliding field
        if self.db.query(User.id).filter(User.username == username).first():
            raise DuplicateUserError("username")
        if self.db.query(User.id).filter(User.email == email).first():
            raise DuplicateUserError("email")

        user = User(
            username=username,
            name=name.strip(),
            email=email,
            password_hash=generate_password_hash(password),
        )
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same key
            self.db.rollback()
            raise DuplicateUserError("username or email")

        logger.info("Registered user id=%s username=%s", user.id, username)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self.db.query(User).filter(User.username == username.strip()).first()
        if not user or not check_password_hash(user.password_hash, password):
            logger.info("Failed login for username=%s", username)
            raise InvalidCredentialsError("Invalid username or password")
        return user
