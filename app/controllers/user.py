import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.user import User
from app.schemas.user import LoginRequest, UserCreate

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, user: UserCreate) -> User:
    if get_user_by_username(db, user.username):
        raise ConflictError("Username already exists")

    if get_user_by_email(db, user.email):
        raise ConflictError("Email already exists")

    db_user = User(
        username=user.username,
        email=user.email,
        hashed_password=get_password_hash(user.password),
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration
        db.rollback()
        if get_user_by_username(db, user.username):
            raise ConflictError("Username already exists")
        if get_user_by_email(db, user.email):
            raise ConflictError("Email already exists")
        raise
    db.refresh(db_user)

    logger.info(f"Created user {db_user.username} (id={db_user.id})")
    return db_user


def login_user(db: Session, credentials: LoginRequest, settings: Settings) -> tuple[str, User]:
    user = get_user_by_username(db, credentials.username)
    if not user:
        raise NotFoundError("User not found")

    if not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"Failed login for user {credentials.username}")
        raise AuthenticationError("Invalid password")

    token = create_access_token(user, settings)
    return token, user
