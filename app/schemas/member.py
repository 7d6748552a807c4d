from datetime import date, datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, ListQuery, PartialUpdate


class OccupationEnum(str, Enum):
    student = "student"
    unemployed = "unemployed"
    employee = "employee"
    entrepreneur = "entrepreneur"


MemberSortField = Literal["id", "firstName", "lastName", "joinDate"]


def _ensure_past(value: Optional[date]) -> Optional[date]:
    if value is not None and value >= date.today():
        raise ValueError("Date must be in the past")
    return value


class MemberCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    birth_date: Optional[date] = None
    birth_place: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = None
    occupation: Optional[OccupationEnum] = None
    phone_number: Optional[str] = Field(None, max_length=255)
    study_or_work_place: Optional[str] = Field(None, max_length=255)
    join_date: Optional[date] = None
    profile_image: Optional[str] = Field(None, max_length=500)

    @field_validator("birth_date")
    @classmethod
    def birth_date_in_past(cls, value: Optional[date]) -> Optional[date]:
        return _ensure_past(value)


class MemberUpdate(PartialUpdate):
    non_nullable = ("first_name", "last_name")

    first_name: Optional[str] = Field(None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(None, min_length=1, max_length=255)
    birth_date: Optional[date] = None
    birth_place: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = None
    occupation: Optional[OccupationEnum] = None
    phone_number: Optional[str] = Field(None, max_length=255)
    study_or_work_place: Optional[str] = Field(None, max_length=255)
    join_date: Optional[date] = None
    profile_image: Optional[str] = Field(None, max_length=500)

    @field_validator("birth_date")
    @classmethod
    def birth_date_in_past(cls, value: Optional[date]) -> Optional[date]:
        return _ensure_past(value)


class MemberOut(CamelModel):
    id: int
    registration_number: str
    first_name: str
    last_name: str
    birth_date: Optional[date] = None
    birth_place: Optional[str] = None
    address: Optional[str] = None
    occupation: Optional[OccupationEnum] = None
    phone_number: Optional[str] = None
    study_or_work_place: Optional[str] = None
    join_date: Optional[date] = None
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MemberQuery(ListQuery):
    search: Optional[str] = None
    sort_by: MemberSortField = "id"
