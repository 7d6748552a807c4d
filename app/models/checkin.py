from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base
from app.utils.datetime_utils import utc_now


class Checkin(Base):
    __tablename__ = "checkins"

    id = Column(Integer, primary_key=True, index=True)
    # No ondelete cascade: members and activities refuse deletion while check-ins exist
    member_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    activity_id = Column(Integer, ForeignKey("activities.id"), nullable=False, index=True)
    check_in_time = Column(DateTime, nullable=False, default=utc_now, index=True)
    check_out_time = Column(DateTime, nullable=True)
    visit_reason = Column(String(500), nullable=True)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    member = relationship("Member", back_populates="checkins")
    activity = relationship("Activity", back_populates="checkins")
