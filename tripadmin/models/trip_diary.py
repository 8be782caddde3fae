from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, Date, Text, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class TripDiary(TimestampMixin, Base):
    __tablename__ = "trip_diaries"

    id = Column(Integer, primary_key=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    entry_date = Column(Date, nullable=False)
    text = Column(Text, nullable=True)
    mood = Column(String(64), nullable=True)

    trip = relationship("Trip", back_populates="diary_entries")
    user = relationship("User")
