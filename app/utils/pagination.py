"""
Pagination and sorting shared by every list endpoint.

The total is counted from the same filtered query that produces the page, so
``has_more`` is always relative to the filtered set.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.orm import Query

from app.schemas.common import ListQuery, Pagination, SortOrderEnum


def apply_sorting(query: Query, sortable: Dict[str, Any], sort_by: str, order: SortOrderEnum, tie_breaker):
    """Order by one allow-listed column, then by ``tie_breaker`` ascending for stable pages"""
    if sort_by not in sortable:
        raise ValueError(f"Unsupported sort field: {sort_by}")

    sort_column = sortable[sort_by]
    ordering = [sort_column.desc() if order == SortOrderEnum.desc else sort_column.asc()]
    if sort_column is not tie_breaker:
        ordering.append(tie_breaker.asc())
    return query.order_by(*ordering)


def paginate(
    query: Query,
    params: ListQuery,
    *,
    sortable: Dict[str, Any],
    sort_by: str,
    tie_breaker,
    options: Optional[Sequence] = None,
) -> Tuple[List[Any], Pagination]:
    total = query.order_by(None).count()

    query = apply_sorting(query, sortable, sort_by, params.order, tie_breaker)
    if options:
        query = query.options(*options)
    items = query.offset(params.offset).limit(params.limit).all()

    pagination = Pagination(
        offset=params.offset,
        limit=params.limit,
        total=total,
        has_more=params.offset + params.limit < total,
    )
    return items, pagination
