import logging

from sqlalchemy.orm import Session, joinedload

from app.controllers.member import get_member_by_id
from app.core.exceptions import NotFoundError
from app.models.volunteer import Volunteer
from app.schemas.common import Pagination
from app.schemas.volunteer import VolunteerCreate, VolunteerQuery, VolunteerUpdate
from app.utils.datetime_utils import utc_now
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

VOLUNTEER_SORT_COLUMNS = {
    "id": Volunteer.id,
    "memberId": Volunteer.member_id,
    "joinDate": Volunteer.join_date,
    "expirationDate": Volunteer.expiration_date,
    "createdAt": Volunteer.created_at,
}


def _ensure_member_exists(db: Session, member_id: int) -> None:
    if not get_member_by_id(db, member_id):
        raise NotFoundError("Member not found")


def create_volunteer(db: Session, volunteer: VolunteerCreate, created_by: int) -> Volunteer:
    _ensure_member_exists(db, volunteer.member_id)

    db_volunteer = Volunteer(**volunteer.model_dump(), created_by=created_by)
    db.add(db_volunteer)
    db.commit()

    logger.info(f"Registered member {volunteer.member_id} as volunteer (id={db_volunteer.id})")
    return get_volunteer_by_id(db, db_volunteer.id)


def get_volunteers(db: Session, params: VolunteerQuery) -> tuple[list[Volunteer], Pagination]:
    return paginate(
        db.query(Volunteer),
        params,
        sortable=VOLUNTEER_SORT_COLUMNS,
        sort_by=params.sort_by,
        tie_breaker=Volunteer.id,
        options=[joinedload(Volunteer.member)],
    )


def get_volunteer_by_id(db: Session, volunteer_id: int) -> Volunteer | None:
    return (
        db.query(Volunteer)
        .options(joinedload(Volunteer.member))
        .filter(Volunteer.id == volunteer_id)
        .first()
    )


def update_volunteer(db: Session, volunteer_id: int, updates: VolunteerUpdate) -> Volunteer | None:
    db_volunteer = get_volunteer_by_id(db, volunteer_id)
    if not db_volunteer:
        return None

    changes = updates.changes()
    if "member_id" in changes:
        _ensure_member_exists(db, changes["member_id"])

    for key, value in changes.items():
        setattr(db_volunteer, key, value)
    db_volunteer.updated_at = utc_now()

    db.commit()
    return get_volunteer_by_id(db, volunteer_id)


def delete_volunteer(db: Session, volunteer_id: int) -> bool:
    db_volunteer = db.query(Volunteer).filter(Volunteer.id == volunteer_id).first()
    if not db_volunteer:
        return False

    db.delete(db_volunteer)
    db.commit()
    return True
