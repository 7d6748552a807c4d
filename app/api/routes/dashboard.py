from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.controllers.dashboard import get_dashboard_stats
from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.dashboard import DashboardStats
from app.utils.datetime_utils import utc_now

router = APIRouter()


@router.get("", response_model=ApiResponse[DashboardStats])
def get_dashboard(
    day: Optional[date] = Query(None, alias="date", description="UTC day, defaults to today"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    stats = get_dashboard_stats(db, day or utc_now().date())
    return {"message": "All Statistics", "data": DashboardStats.model_validate(stats)}
