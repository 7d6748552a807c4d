from sqlalchemy import Column, Integer, String, Date, Enum, Text, DateTime
from sqlalchemy.sql import func

from app.db.session import Base
from app.schemas.member import OccupationEnum


class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    registration_number = Column(String(255), unique=True, index=True, nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    birth_date = Column(Date, nullable=True)
    birth_place = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    occupation = Column(Enum(OccupationEnum, name="occupation"), nullable=True)
    phone_number = Column(String(255), nullable=True)
    study_or_work_place = Column(String(255), nullable=True)
    join_date = Column(Date, nullable=True)
    profile_image = Column(String(500), nullable=True)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
