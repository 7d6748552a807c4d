from datetime import date as date_type, datetime
from typing import Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.activity import ActivityOut
from app.schemas.common import MAX_ID, CamelModel, ListQuery, PartialUpdate, SortOrderEnum
from app.schemas.member import MemberOut
from app.utils.datetime_utils import to_naive_utc

CheckinSortField = Literal["id", "checkInTime", "createdAt"]

CHECKOUT_ORDER_MESSAGE = "Check-out time must be after check-in time"


def _check_out_after_check_in(value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
    check_in_time = info.data.get("check_in_time")
    if value is not None and check_in_time is not None and value <= check_in_time:
        raise ValueError(CHECKOUT_ORDER_MESSAGE)
    return value


class CheckinCreate(CamelModel):
    registration_number: str = Field(..., min_length=1)
    activity_id: int = Field(..., gt=0, le=MAX_ID)
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    visit_reason: Optional[str] = Field(None, max_length=500)

    @field_validator("check_in_time", "check_out_time")
    @classmethod
    def normalize_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

    @field_validator("check_out_time")
    @classmethod
    def check_out_after_check_in(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        return _check_out_after_check_in(value, info)


class CheckinUpdate(PartialUpdate):
    non_nullable = ("check_in_time",)

    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    visit_reason: Optional[str] = Field(None, max_length=500)

    @field_validator("check_in_time", "check_out_time")
    @classmethod
    def normalize_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

    @field_validator("check_out_time")
    @classmethod
    def check_out_after_check_in(cls, value: Optional[datetime], info: ValidationInfo) -> Optional[datetime]:
        return _check_out_after_check_in(value, info)


class CheckinOut(CamelModel):
    id: int
    member_id: int
    activity_id: int
    check_in_time: datetime
    check_out_time: Optional[datetime] = None
    visit_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    member: Optional[MemberOut] = None


class CheckinDetailOut(CheckinOut):
    activity: Optional[ActivityOut] = None


class CheckinQuery(ListQuery):
    member_id: Optional[int] = None
    activity_id: Optional[int] = None
    date: Optional[date_type] = None
    sort_by: CheckinSortField = "id"
    order: SortOrderEnum = SortOrderEnum.desc
