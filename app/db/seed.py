"""
Sample data for local development.

Creates an ``admin`` user (password ``password123``), five members, five
activities and a handful of check-ins. Run with ``python -m app.db.seed``;
an already populated database is left untouched.
"""

import logging
from datetime import date, time, timedelta

from sqlalchemy.orm import Session

import app.models  # noqa: F401  registers every table on Base.metadata
from app.controllers.activity import create_activity
from app.controllers.member import create_member
from app.core.logging_config import setup_logging
from app.core.security import get_password_hash
from app.db.session import SessionLocal, Base, engine
from app.models.checkin import Checkin
from app.models.member import Member
from app.models.user import User
from app.schemas.activity import ActivityCreate
from app.schemas.member import MemberCreate
from app.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@acme.org"
ADMIN_PASSWORD = "password123"

MEMBERS = [
    {
        "first_name": "John", "last_name": "Doe", "birth_date": date(1990, 1, 15),
        "birth_place": "New York", "address": "123 Main St, New York, NY 10001",
        "occupation": "employee", "phone_number": "+1234567890",
        "study_or_work_place": "Tech Corp", "join_date": date(2023, 1, 1),
    },
    {
        "first_name": "Jane", "last_name": "Smith", "birth_date": date(1995, 5, 20),
        "birth_place": "Los Angeles", "address": "456 Oak Ave, Los Angeles, CA 90001",
        "occupation": "student", "phone_number": "+1234567891",
        "study_or_work_place": "State University", "join_date": date(2023, 2, 1),
    },
    {
        "first_name": "Michael", "last_name": "Johnson", "birth_date": date(1988, 8, 10),
        "birth_place": "Chicago", "address": "789 Elm St, Chicago, IL 60601",
        "occupation": "entrepreneur", "phone_number": "+1234567892",
        "study_or_work_place": "Startup Inc", "join_date": date(2023, 3, 15),
    },
    {
        "first_name": "Sarah", "last_name": "Williams", "birth_date": date(1992, 12, 5),
        "birth_place": "Boston", "address": "321 Pine Rd, Boston, MA 02101",
        "occupation": "unemployed", "phone_number": "+1234567893",
        "join_date": date(2023, 4, 10),
    },
    {
        "first_name": "David", "last_name": "Brown", "birth_date": date(1985, 3, 22),
        "birth_place": "Seattle", "address": "654 Maple Dr, Seattle, WA 98101",
        "occupation": "employee", "phone_number": "+1234567894",
        "study_or_work_place": "Microsoft", "join_date": date(2023, 5, 20),
    },
]

ACTIVITIES = [
    {
        "name": "Tech Workshop",
        "description": "Hands-on workshop on modern web development technologies",
        "is_periodic": True, "day_of_week": "tuesday",
        "start_time": time(10, 0), "end_time": time(12, 0),
    },
    {
        "name": "Monthly Meeting",
        "description": "Regular monthly organization meeting",
        "is_periodic": True, "day_of_week": "saturday",
        "start_time": time(13, 0), "end_time": time(16, 0),
    },
    {
        "name": "Networking Event",
        "description": "Professional networking and social gathering",
        "is_periodic": False, "start_date": date(2025, 11, 19), "end_date": date(2025, 11, 19),
        "start_time": time(10, 0), "end_time": time(12, 0),
    },
    {
        "name": "Training Session",
        "description": "Leadership and communication skills training",
        "is_periodic": False, "start_date": date(2025, 11, 24), "end_date": date(2025, 11, 26),
        "start_time": time(10, 0), "end_time": time(12, 0),
    },
    {
        "name": "Old Event",
        "description": "This event is no longer active",
        "is_active": False, "is_periodic": True, "day_of_week": "wednesday",
        "start_time": time(13, 0), "end_time": time(16, 0),
    },
]

# (member index, activity index, hours ago, visit length in hours or None while still inside)
CHECKINS = [
    (0, 0, 2, 1),
    (1, 0, 3, 2),
    (2, 1, 5, None),
    (3, 1, 26, 2),
    (4, 2, 28, 1),
    (0, 3, 50, 3),
    (1, 2, 1, None),
    (2, 3, 74, 2),
]


def seed(db: Session) -> bool:
    """Insert the sample data set. Returns False when members already exist."""
    if db.query(Member.id).first():
        logger.info("Database already contains members, skipping seed")
        return False

    admin = db.query(User).filter(User.username == ADMIN_USERNAME).first()
    if not admin:
        admin = User(
            username=ADMIN_USERNAME,
            email=ADMIN_EMAIL,
            hashed_password=get_password_hash(ADMIN_PASSWORD),
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)

    members = [create_member(db, MemberCreate(**data)) for data in MEMBERS]
    activities = [create_activity(db, ActivityCreate(**data), created_by=admin.id) for data in ACTIVITIES]

    now = utc_now()
    for member_idx, activity_idx, hours_ago, duration in CHECKINS:
        check_in_time = now - timedelta(hours=hours_ago)
        db.add(Checkin(
            member_id=members[member_idx].id,
            activity_id=activities[activity_idx].id,
            check_in_time=check_in_time,
            check_out_time=check_in_time + timedelta(hours=duration) if duration else None,
        ))
    db.commit()

    logger.info(
        f"Seeded {len(members)} members, {len(activities)} activities and {len(CHECKINS)} check-ins"
    )
    return True


if __name__ == "__main__":
    setup_logging()
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed(session)
    finally:
        session.close()
