from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

import app.controllers.member as crud_member
from app.core.exceptions import NotFoundError
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import DEFAULT_LIMIT, MAX_ID, ApiResponse, PaginatedResponse, SortOrderEnum
from app.schemas.member import MemberCreate, MemberOut, MemberQuery, MemberSortField, MemberUpdate

router = APIRouter()


def member_query(
    offset: int = Query(0, ge=0, le=MAX_ID),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    search: Optional[str] = Query(None),
    sort_by: MemberSortField = Query("id", alias="sortBy"),
    order: SortOrderEnum = Query(SortOrderEnum.asc),
) -> MemberQuery:
    return MemberQuery(offset=offset, limit=limit, search=search, sort_by=sort_by, order=order)


@router.post("", response_model=ApiResponse[MemberOut], status_code=status.HTTP_201_CREATED)
def create_member(
    member: MemberCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_member = crud_member.create_member(db, member)
    return {"message": "Member created successfully", "data": MemberOut.model_validate(db_member)}


@router.get("", response_model=PaginatedResponse[MemberOut])
def list_members(params: MemberQuery = Depends(member_query), db: Session = Depends(get_db)):
    members, pagination = crud_member.get_members(db, params)
    return {
        "message": "Members retrieved successfully",
        "data": [MemberOut.model_validate(m) for m in members],
        "pagination": pagination,
    }


# Must stay above /{member_id}
@router.get("/registration/{registration_number}", response_model=ApiResponse[MemberOut])
def get_member_by_registration_number(registration_number: str, db: Session = Depends(get_db)):
    db_member = crud_member.get_member_by_registration_number(db, registration_number)
    if not db_member:
        raise NotFoundError("Member not found")
    return {"message": "Member retrieved successfully", "data": MemberOut.model_validate(db_member)}


@router.get("/{member_id}", response_model=ApiResponse[MemberOut])
def get_member(
    member_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_member = crud_member.get_member_by_id(db, member_id)
    if not db_member:
        raise NotFoundError("Member not found")
    return {"message": "Member retrieved successfully", "data": MemberOut.model_validate(db_member)}


@router.put("/{member_id}", response_model=ApiResponse[MemberOut])
def update_member(
    updates: MemberUpdate,
    member_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    db_member = crud_member.update_member(db, member_id, updates)
    if not db_member:
        raise NotFoundError("Member not found")
    return {"message": "Member updated successfully", "data": MemberOut.model_validate(db_member)}


@router.delete("/{member_id}", response_model=ApiResponse)
def delete_member(
    member_id: int = Path(..., ge=1, le=MAX_ID),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not crud_member.delete_member(db, member_id):
        raise NotFoundError("Member not found")
    return {"message": "Member deleted successfully", "data": None}
