from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin

DEFAULT_PARTICIPANT_ROLE = "viewer"


class TripParticipant(TimestampMixin, Base):
    __tablename__ = "trip_participants"

    id = Column(Integer, primary_key=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String(32), default=DEFAULT_PARTICIPANT_ROLE, nullable=False)
    joined_at = Column(DateTime(timezone=True), nullable=False)

    trip = relationship("Trip", back_populates="participants")
    user = relationship("User")
