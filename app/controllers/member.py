import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.exceptions import DependentRecordsError
from app.models.checkin import Checkin
from app.models.member import Member
from app.models.volunteer import Volunteer
from app.schemas.common import Pagination
from app.schemas.member import MemberCreate, MemberQuery, MemberUpdate
from app.utils.pagination import paginate
from app.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

REGISTRATION_NUMBER_PREFIX = "ACMJN-"
REGISTRATION_NUMBER_WIDTH = 6

MEMBER_SORT_COLUMNS = {
    "id": Member.id,
    "firstName": Member.first_name,
    "lastName": Member.last_name,
    "joinDate": Member.join_date,
}


def format_registration_number(member_id: int) -> str:
    """ACMJN- followed by the id zero-padded to six digits, e.g. 7 -> ACMJN-000007."""
    return f"{REGISTRATION_NUMBER_PREFIX}{member_id:0{REGISTRATION_NUMBER_WIDTH}d}"


def create_member(db: Session, member: MemberCreate) -> Member:
    # The registration number depends on the id, so insert with a unique
    # placeholder, flush to get the id, then set the real value. Both writes
    # share one transaction and are never visible separately.
    db_member = Member(
        **member.model_dump(),
        registration_number=f"PENDING-{uuid.uuid4().hex}",
    )
    db.add(db_member)
    try:
        db.flush()
        db_member.registration_number = format_registration_number(db_member.id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_member)

    logger.info(f"Created member {db_member.registration_number} (id={db_member.id})")
    return db_member


def get_members(db: Session, params: MemberQuery) -> tuple[list[Member], Pagination]:
    query = db.query(Member)

    if params.search:
        pattern = f"%{params.search}%"
        query = query.filter(
            or_(
                Member.first_name.ilike(pattern),
                Member.last_name.ilike(pattern),
                Member.registration_number.ilike(pattern),
            )
        )

    return paginate(
        query,
        params,
        sortable=MEMBER_SORT_COLUMNS,
        sort_by=params.sort_by,
        tie_breaker=Member.id,
    )


def get_member_by_id(db: Session, member_id: int) -> Member | None:
    return db.query(Member).filter(Member.id == member_id).first()


def get_member_by_registration_number(db: Session, registration_number: str) -> Member | None:
    return db.query(Member).filter(Member.registration_number == registration_number).first()


def update_member(db: Session, member_id: int, updates: MemberUpdate) -> Member | None:
    db_member = get_member_by_id(db, member_id)
    if not db_member:
        return None

    for key, value in updates.changes().items():
        setattr(db_member, key, value)
    db_member.updated_at = utc_now()

    db.commit()
    db.refresh(db_member)
    return db_member


def delete_member(db: Session, member_id: int) -> bool:
    db_member = get_member_by_id(db, member_id)
    if not db_member:
        return False

    if db.query(Checkin.id).filter(Checkin.member_id == member_id).first():
        raise DependentRecordsError("Cannot delete member with associated check-ins")

    if db.query(Volunteer.id).filter(Volunteer.member_id == member_id).first():
        raise DependentRecordsError("Cannot delete member with associated volunteer records")

    registration_number = db_member.registration_number
    db.delete(db_member)
    db.commit()

    logger.info(f"Deleted member {registration_number} (id={member_id})")
    return True
