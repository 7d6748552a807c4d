from sqlalchemy.orm import relationship

from .user import User
from .member import Member
from .activity import Activity
from .checkin import Checkin
from .volunteer import Volunteer

# No delete cascades: dependent rows block deletion in the controllers instead
Member.checkins = relationship("Checkin", back_populates="member")
Member.volunteers = relationship("Volunteer", back_populates="member")
Activity.checkins = relationship("Checkin", back_populates="activity")
