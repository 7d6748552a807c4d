from datetime import date

from sqlalchemy.orm import Session

from app.controllers.checkin import get_checkins_for_day
from app.models.activity import Activity
from app.models.member import Member


def get_dashboard_stats(db: Session, day: date) -> dict:
    """Check-ins for ``day`` with member and activity attached, plus overall counts."""
    return {
        "checkins": get_checkins_for_day(db, day),
        "members": db.query(Member).count(),
        "activities": db.query(Activity).count(),
    }
