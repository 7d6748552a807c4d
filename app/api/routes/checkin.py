from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

import app.controllers.checkin as crud_checkin
from app.core.exceptions import NotFoundError
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.checkin import CheckinCreate, CheckinOut, CheckinQuery, CheckinSortField, CheckinUpdate
from app.schemas.common import DEFAULT_LIMIT, MAX_ID, ApiResponse, PaginatedResponse, SortOrderEnum

router = APIRouter()


def checkin_query(
    offset: int = Query(0, ge=0, le=MAX_ID),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    member_id: Optional[int] = Query(None, alias="memberId", ge=1, le=MAX_ID),
    activity_id: Optional[int] = Query(None, alias="activityId", ge=1, le=MAX_ID),
    day: Optional[date] = Query(None, alias="date", description="UTC day, YYYY-MM-DD"),
    sort_by: CheckinSortField = Query("id", alias="sortBy"),
    order: SortOrderEnum = Query(SortOrderEnum.desc),
) -> CheckinQuery:
    return CheckinQuery(
        offset=offset,
        limit=limit,
        member_id=member_id,
        activity_id=activity_id,
        date=day,
        sort_by=sort_by,
        order=order,
    )


def _page(checkins, pagination, message: str) -> dict:
    return {
        "message": message,
        "data": [CheckinOut.model_validate(c) for c in checkins],
        "pagination": pagination,
    }


# Open: members check themselves in at the front desk
@router.post("", response_model=ApiResponse[CheckinOut], status_code=status.HTTP_201_CREATED)
def create_checkin(checkin: CheckinCreate, db: Session = Depends(get_db)):
    db_checkin = crud_checkin.create_checkin(db, checkin)
    return {"message": "Checkin created successfully", "data": CheckinOut.model_validate(db_checkin)}


@router.get("", response_model=PaginatedResponse[CheckinOut])
def list_checkins(params: CheckinQuery = Depends(checkin_query), db: Session = Depends(get_db)):
    checkins, pagination = crud_checkin.get_checkins(db, params)
    return _page(checkins, pagination, "All checkins")


@router.get("/registration/{registration_number}", response_model=PaginatedResponse[CheckinOut])
def list_member_checkins(
    registration_number: str,
    params: CheckinQuery = Depends(checkin_query),
    db: Session = Depends(get_db),
):
    checkins, pagination = crud_checkin.get_checkins_by_registration_number(db, registration_number, params)
    return _page(checkins, pagination, "Checkins found")


@router.get("/{checkin_id}", response_model=ApiResponse[CheckinOut])
def get_checkin(
    checkin_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
):
    db_checkin = crud_checkin.get_checkin_by_id(db, checkin_id)
    if not db_checkin:
        raise NotFoundError("Check-in not found")
    return {"message": "Checkin found", "data": CheckinOut.model_validate(db_checkin)}


@router.put("/{checkin_id}", response_model=ApiResponse[CheckinOut])
def update_checkin(
    updates: CheckinUpdate,
    checkin_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_checkin = crud_checkin.update_checkin(db, checkin_id, updates)
    if not db_checkin:
        raise NotFoundError("Check-in not found")
    return {"message": "Checkin updated successfully", "data": CheckinOut.model_validate(db_checkin)}


@router.delete("/{checkin_id}", response_model=ApiResponse)
def delete_checkin(
    checkin_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not crud_checkin.delete_checkin(db, checkin_id):
        raise NotFoundError("Check-in not found")
    return {"message": "Checkin deleted successfully", "data": None}
