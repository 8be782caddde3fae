from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class ItineraryItem(TimestampMixin, Base):
    __tablename__ = "itinerary_items"

    id = Column(Integer, primary_key=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    day_number = Column(Integer, nullable=False)
    start_time = Column(DateTime(timezone=True), nullable=True)
    end_time = Column(DateTime(timezone=True), nullable=True)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=True, index=True)
    note = Column(Text, nullable=True)

    trip = relationship("Trip", back_populates="itinerary_items")
    place = relationship("Place")
