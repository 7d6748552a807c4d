from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

import app.controllers.activity as crud_activity
from app.core.exceptions import NotFoundError
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.activity import ActivityCreate, ActivityOut, ActivityQuery, ActivitySortField, ActivityUpdate
from app.schemas.common import DEFAULT_LIMIT, MAX_ID, ApiResponse, PaginatedResponse, SortOrderEnum

router = APIRouter()


def activity_query(
    offset: int = Query(0, ge=0, le=MAX_ID),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    sort_by: ActivitySortField = Query("id", alias="sortBy"),
    order: SortOrderEnum = Query(SortOrderEnum.asc),
) -> ActivityQuery:
    return ActivityQuery(offset=offset, limit=limit, is_active=is_active, sort_by=sort_by, order=order)


@router.post("", response_model=ApiResponse[ActivityOut], status_code=status.HTTP_201_CREATED)
def create_activity(
    activity: ActivityCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_activity = crud_activity.create_activity(db, activity, created_by=current_user.id)
    return {"message": "Activity created successfully", "data": ActivityOut.model_validate(db_activity)}


@router.get("", response_model=PaginatedResponse[ActivityOut])
def list_activities(params: ActivityQuery = Depends(activity_query), db: Session = Depends(get_db)):
    activities, pagination = crud_activity.get_activities(db, params)
    return {
        "message": "All activities",
        "data": [ActivityOut.model_validate(a) for a in activities],
        "pagination": pagination,
    }


@router.get("/{activity_id}", response_model=ApiResponse[ActivityOut])
def get_activity(
    activity_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
):
    db_activity = crud_activity.get_activity_by_id(db, activity_id)
    if not db_activity:
        raise NotFoundError("Activity not found")
    return {"message": "Activity found", "data": ActivityOut.model_validate(db_activity)}


@router.put("/{activity_id}", response_model=ApiResponse[ActivityOut])
def update_activity(
    updates: ActivityUpdate,
    activity_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_activity = crud_activity.update_activity(db, activity_id, updates)
    if not db_activity:
        raise NotFoundError("Activity not found")
    return {"message": "Activity updated successfully", "data": ActivityOut.model_validate(db_activity)}


@router.delete("/{activity_id}", response_model=ApiResponse)
def delete_activity(
    activity_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not crud_activity.delete_activity(db, activity_id):
        raise NotFoundError("Activity not found")
    return {"message": "Activity deleted successfully", "data": None}
