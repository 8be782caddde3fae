"""
Trip model, the aggregate most admin resources hang off
"""
from sqlalchemy import Column, Integer, String, Date, ForeignKey, Boolean
from sqlalchemy.orm import relationship

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin

DEFAULT_TRIP_STATUS = "planning"


class Trip(TimestampMixin, Base):
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    destination_country = Column(String(255), nullable=False)
    destination_city = Column(String(255), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    status = Column(String(32), default=DEFAULT_TRIP_STATUS, nullable=False, index=True)
    is_group = Column(Boolean, default=False, nullable=False)
    progress = Column(String(255), nullable=True)

    # Relationships
    user = relationship("User", back_populates="trips")
    participants = relationship("TripParticipant", back_populates="trip", cascade="all, delete-orphan")
    itinerary_items = relationship(
        "ItineraryItem",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="ItineraryItem.day_number",
    )
    checkpoints = relationship("MapCheckpoint", back_populates="trip", cascade="all, delete-orphan")
    checklist_items = relationship("ChecklistItem", back_populates="trip", cascade="all, delete-orphan")
    diary_entries = relationship("TripDiary", back_populates="trip", cascade="all, delete-orphan")
    shares = relationship("Share", back_populates="trip", cascade="all, delete-orphan")
