from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

import app.controllers.volunteer as crud_volunteer
from app.core.exceptions import NotFoundError
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import DEFAULT_LIMIT, MAX_ID, ApiResponse, PaginatedResponse, SortOrderEnum
from app.schemas.volunteer import (
    VolunteerCreate,
    VolunteerOut,
    VolunteerQuery,
    VolunteerSortField,
    VolunteerUpdate,
)

router = APIRouter()


def volunteer_query(
    offset: int = Query(0, ge=0, le=MAX_ID),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    sort_by: VolunteerSortField = Query("id", alias="sortBy"),
    order: SortOrderEnum = Query(SortOrderEnum.asc),
) -> VolunteerQuery:
    return VolunteerQuery(offset=offset, limit=limit, sort_by=sort_by, order=order)


@router.post("", response_model=ApiResponse[VolunteerOut], status_code=status.HTTP_201_CREATED)
def create_volunteer(
    volunteer: VolunteerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_volunteer = crud_volunteer.create_volunteer(db, volunteer, created_by=current_user.id)
    return {"message": "Volunteer created successfully", "data": VolunteerOut.model_validate(db_volunteer)}


@router.get("", response_model=PaginatedResponse[VolunteerOut])
def list_volunteers(params: VolunteerQuery = Depends(volunteer_query), db: Session = Depends(get_db)):
    volunteers, pagination = crud_volunteer.get_volunteers(db, params)
    return {
        "message": "All volunteers",
        "data": [VolunteerOut.model_validate(v) for v in volunteers],
        "pagination": pagination,
    }


@router.get("/{volunteer_id}", response_model=ApiResponse[VolunteerOut])
def get_volunteer(
    volunteer_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
):
    db_volunteer = crud_volunteer.get_volunteer_by_id(db, volunteer_id)
    if not db_volunteer:
        raise NotFoundError("Volunteer not found")
    return {"message": "Volunteer found", "data": VolunteerOut.model_validate(db_volunteer)}


@router.put("/{volunteer_id}", response_model=ApiResponse[VolunteerOut])
def update_volunteer(
    updates: VolunteerUpdate,
    volunteer_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_volunteer = crud_volunteer.update_volunteer(db, volunteer_id, updates)
    if not db_volunteer:
        raise NotFoundError("Volunteer not found")
    return {"message": "Volunteer updated successfully", "data": VolunteerOut.model_validate(db_volunteer)}


@router.delete("/{volunteer_id}", response_model=ApiResponse)
def delete_volunteer(
    volunteer_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not crud_volunteer.delete_volunteer(db, volunteer_id):
        raise NotFoundError("Volunteer not found")
    return {"message": "Volunteer deleted successfully", "data": None}
