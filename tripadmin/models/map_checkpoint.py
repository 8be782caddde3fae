from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, Float, DateTime, Text, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class MapCheckpoint(TimestampMixin, Base):
    __tablename__ = "map_checkpoints"

    id = Column(Integer, primary_key=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    checked_in_at = Column(DateTime(timezone=True), nullable=True)
    note = Column(Text, nullable=True)

    trip = relationship("Trip", back_populates="checkpoints")
    place = relationship("Place")
    user = relationship("User")
    images = relationship("CheckpointImage", back_populates="checkpoint", cascade="all, delete-orphan")
