from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form stored in the database"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed to be UTC already"""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, end) range covering one UTC calendar day"""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)
