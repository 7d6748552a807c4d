from enum import Enum
from typing import ClassVar, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

# Largest value a signed 64-bit INTEGER column holds
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    """Base for every request/response schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SortOrderEnum(str, Enum):
    asc = "asc"
    desc = "desc"


class Pagination(CamelModel):
    offset: int
    limit: int
    total: int
    has_more: bool


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None


class PaginatedResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str
    data: List[T]
    pagination: Pagination


class PartialUpdate(CamelModel):
    """Update payload where omitted fields are left untouched."""

    # Columns that may not be cleared by sending null
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        return {
            key: value for key, value in data.items()
            if value is not None or key not in self.non_nullable
        }


class ListQuery(CamelModel):
    """Pagination window shared by all list endpoints."""

    offset: int = Field(0, ge=0, le=MAX_ID)
    limit: int = Field(DEFAULT_LIMIT, ge=1)
    order: SortOrderEnum = SortOrderEnum.asc

    @field_validator("limit")
    @classmethod
    def cap_limit(cls, value: int) -> int:
        # Oversized pages are clamped, not rejected
        return min(value, MAX_LIMIT)
