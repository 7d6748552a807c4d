from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import MAX_ID, CamelModel, ListQuery, PartialUpdate
from app.schemas.member import MemberOut

VolunteerSortField = Literal["id", "memberId", "joinDate", "expirationDate", "createdAt"]


class VolunteerCreate(CamelModel):
    member_id: int = Field(..., gt=0, le=MAX_ID)
    join_date: Optional[date] = None
    expiration_date: Optional[date] = None


class VolunteerUpdate(PartialUpdate):
    non_nullable = ("member_id",)

    member_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    join_date: Optional[date] = None
    expiration_date: Optional[date] = None


class VolunteerOut(CamelModel):
    id: int
    member_id: int
    join_date: Optional[date] = None
    expiration_date: Optional[date] = None
    created_by: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    member: Optional[MemberOut] = None


class VolunteerQuery(ListQuery):
    sort_by: VolunteerSortField = "id"
