import logging
from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.controllers.activity import get_activity_by_id
from app.controllers.member import get_member_by_registration_number
from app.core.exceptions import NotFoundError, ValidationFailedError, field_error
from app.models.checkin import Checkin
from app.schemas.checkin import CHECKOUT_ORDER_MESSAGE, CheckinCreate, CheckinQuery, CheckinUpdate
from app.schemas.common import Pagination
from app.utils.datetime_utils import day_bounds, utc_now
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

CHECKIN_SORT_COLUMNS = {
    "id": Checkin.id,
    "checkInTime": Checkin.check_in_time,
    "createdAt": Checkin.created_at,
}


def ensure_checkout_after_checkin(check_in_time: datetime, check_out_time: Optional[datetime]) -> None:
    if check_out_time is not None and check_out_time <= check_in_time:
        raise ValidationFailedError([field_error("checkOutTime", CHECKOUT_ORDER_MESSAGE)])


def create_checkin(db: Session, checkin: CheckinCreate) -> Checkin:
    member = get_member_by_registration_number(db, checkin.registration_number)
    if not member:
        raise NotFoundError("Member not found")

    activity = get_activity_by_id(db, checkin.activity_id)
    if not activity:
        raise NotFoundError("Activity not found")

    check_in_time = checkin.check_in_time or utc_now()
    ensure_checkout_after_checkin(check_in_time, checkin.check_out_time)

    db_checkin = Checkin(
        member_id=member.id,
        activity_id=activity.id,
        check_in_time=check_in_time,
        check_out_time=checkin.check_out_time,
        visit_reason=checkin.visit_reason,
    )
    db.add(db_checkin)
    db.commit()
    db.refresh(db_checkin)

    logger.info(f"Member {member.registration_number} checked in to activity {activity.id}")
    return db_checkin


def get_checkins(db: Session, params: CheckinQuery) -> tuple[list[Checkin], Pagination]:
    query = db.query(Checkin)

    if params.member_id is not None:
        query = query.filter(Checkin.member_id == params.member_id)
    if params.activity_id is not None:
        query = query.filter(Checkin.activity_id == params.activity_id)
    if params.date is not None:
        start, end = day_bounds(params.date)
        query = query.filter(Checkin.check_in_time >= start, Checkin.check_in_time < end)

    return paginate(
        query,
        params,
        sortable=CHECKIN_SORT_COLUMNS,
        sort_by=params.sort_by,
        tie_breaker=Checkin.id,
        options=[joinedload(Checkin.member)],
    )


def get_checkins_by_registration_number(
    db: Session, registration_number: str, params: CheckinQuery
) -> tuple[list[Checkin], Pagination]:
    member = get_member_by_registration_number(db, registration_number)
    if not member:
        raise NotFoundError("Member not found")

    return get_checkins(db, params.model_copy(update={"member_id": member.id}))


def get_checkins_for_day(db: Session, day: date) -> list[Checkin]:
    start, end = day_bounds(day)
    return (
        db.query(Checkin)
        .options(joinedload(Checkin.member), joinedload(Checkin.activity))
        .filter(Checkin.check_in_time >= start, Checkin.check_in_time < end)
        .order_by(Checkin.check_in_time.asc(), Checkin.id.asc())
        .all()
    )


def get_checkin_by_id(db: Session, checkin_id: int) -> Checkin | None:
    return (
        db.query(Checkin)
        .options(joinedload(Checkin.member))
        .filter(Checkin.id == checkin_id)
        .first()
    )


def update_checkin(db: Session, checkin_id: int, updates: CheckinUpdate) -> Checkin | None:
    db_checkin = get_checkin_by_id(db, checkin_id)
    if not db_checkin:
        return None

    changes = updates.changes()
    ensure_checkout_after_checkin(
        changes.get("check_in_time", db_checkin.check_in_time),
        changes.get("check_out_time", db_checkin.check_out_time),
    )

    for key, value in changes.items():
        setattr(db_checkin, key, value)
    db_checkin.updated_at = utc_now()

    db.commit()
    db.refresh(db_checkin)
    return db_checkin


def delete_checkin(db: Session, checkin_id: int) -> bool:
    db_checkin = db.query(Checkin).filter(Checkin.id == checkin_id).first()
    if not db_checkin:
        return False

    db.delete(db_checkin)
    db.commit()
    return True
