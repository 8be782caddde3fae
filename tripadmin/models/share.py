from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin

DEFAULT_SHARE_PERMISSION = "viewer"


class Share(TimestampMixin, Base):
    __tablename__ = "shares"

    id = Column(Integer, primary_key=True)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    permission = Column(String(32), default=DEFAULT_SHARE_PERMISSION, nullable=False)
    token = Column(String(255), unique=True, nullable=False)

    trip = relationship("Trip", back_populates="shares")
    user = relationship("User")
