from datetime import date, datetime, time
from enum import Enum
from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CamelModel, ListQuery, PartialUpdate


class DayOfWeekEnum(str, Enum):
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"


ActivitySortField = Literal["id", "name", "createdAt"]


class ActivityCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)
    emoji: Optional[str] = Field(None, max_length=10)
    is_active: bool = True
    is_periodic: bool = True
    day_of_week: Optional[DayOfWeekEnum] = None  # used when is_periodic
    start_time: time
    end_time: time
    start_date: Optional[date] = None  # used when not is_periodic
    end_date: Optional[date] = None


class ActivityUpdate(PartialUpdate):
    non_nullable = ("name", "is_active", "is_periodic", "start_time", "end_time")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=500)
    emoji: Optional[str] = Field(None, max_length=10)
    is_active: Optional[bool] = None
    is_periodic: Optional[bool] = None
    day_of_week: Optional[DayOfWeekEnum] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ActivityOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    emoji: Optional[str] = None
    is_active: bool
    is_periodic: bool
    day_of_week: Optional[DayOfWeekEnum] = None
    start_time: time
    end_time: time
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_by: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ActivityQuery(ListQuery):
    is_active: Optional[bool] = None
    sort_by: ActivitySortField = "id"
