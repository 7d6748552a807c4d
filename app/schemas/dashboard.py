from typing import List

from app.schemas.checkin import CheckinDetailOut
from app.schemas.common import CamelModel


class DashboardStats(CamelModel):
    checkins: List[CheckinDetailOut]
    members: int
    activities: int
