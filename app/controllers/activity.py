import logging

from sqlalchemy.orm import Session

from app.core.exceptions import DependentRecordsError
from app.models.activity import Activity
from app.models.checkin import Checkin
from app.schemas.activity import ActivityCreate, ActivityQuery, ActivityUpdate
from app.schemas.common import Pagination
from app.utils.datetime_utils import utc_now
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

ACTIVITY_SORT_COLUMNS = {
    "id": Activity.id,
    "name": Activity.name,
    "createdAt": Activity.created_at,
}


def create_activity(db: Session, activity: ActivityCreate, created_by: int) -> Activity:
    db_activity = Activity(**activity.model_dump(), created_by=created_by)
    db.add(db_activity)
    db.commit()
    db.refresh(db_activity)

    logger.info(f"Created activity '{db_activity.name}' (id={db_activity.id}) by user {created_by}")
    return db_activity


def get_activities(db: Session, params: ActivityQuery) -> tuple[list[Activity], Pagination]:
    query = db.query(Activity)

    if params.is_active is not None:
        query = query.filter(Activity.is_active == params.is_active)

    return paginate(
        query,
        params,
        sortable=ACTIVITY_SORT_COLUMNS,
        sort_by=params.sort_by,
        tie_breaker=Activity.id,
    )


def get_activity_by_id(db: Session, activity_id: int) -> Activity | None:
    return db.query(Activity).filter(Activity.id == activity_id).first()


def update_activity(db: Session, activity_id: int, updates: ActivityUpdate) -> Activity | None:
    db_activity = get_activity_by_id(db, activity_id)
    if not db_activity:
        return None

    for key, value in updates.changes().items():
        setattr(db_activity, key, value)
    db_activity.updated_at = utc_now()

    db.commit()
    db.refresh(db_activity)
    return db_activity


def delete_activity(db: Session, activity_id: int) -> bool:
    db_activity = get_activity_by_id(db, activity_id)
    if not db_activity:
        return False

    if db.query(Checkin.id).filter(Checkin.activity_id == activity_id).first():
        raise DependentRecordsError("Cannot delete activity with associated check-ins")

    db.delete(db_activity)
    db.commit()

    logger.info(f"Deleted activity id={activity_id}")
    return True
