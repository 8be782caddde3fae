from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class ChecklistItem(TimestampMixin, Base):
    __tablename__ = "checklist_items"

    id = Column(Integer, primary_key=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(String(255), nullable=False)
    is_checked = Column(Boolean, default=False, nullable=False)

    trip = relationship("Trip", back_populates="checklist_items")
    user = relationship("User")
