from sqlalchemy import Column, Integer, String, Boolean, Date, Enum, ForeignKey, Text, DateTime, Time
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base
from app.schemas.activity import DayOfWeekEnum


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image = Column(String(500), nullable=True)
    emoji = Column(String(10), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_periodic = Column(Boolean, nullable=False, default=True)
    day_of_week = Column(Enum(DayOfWeekEnum, name="day_of_week"), nullable=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    creator = relationship("User")
