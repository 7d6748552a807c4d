import logging

from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.security import get_password_hash
from app.db.session import SessionLocal, Base, engine
import app.models  # noqa: F401  registers every table on Base.metadata
from app.models.user import User

logger = logging.getLogger(__name__)


def seed_bootstrap_admin(db: Session, settings: Settings) -> User | None:
    """Create the configured first account while the users table is still empty."""
    if not settings.bootstrap_admin_configured:
        return None

    if db.query(User.id).first():
        logger.info("Users already exist, skipping bootstrap account")
        return None

    admin_user = User(
        username=settings.FIRST_ADMIN_USERNAME,
        email=settings.FIRST_ADMIN_EMAIL,
        hashed_password=get_password_hash(settings.FIRST_ADMIN_PASSWORD),
    )
    db.add(admin_user)
    db.commit()
    db.refresh(admin_user)

    logger.info(f"Bootstrap account '{admin_user.username}' created")
    return admin_user


def init_db():
    # Create tables
    Base.metadata.create_all(bind=engine)

    db: Session = SessionLocal()
    try:
        seed_bootstrap_admin(db, get_settings())
    finally:
        db.close()
