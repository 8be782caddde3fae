from sqlalchemy.orm import relationship, object_session
from sqlalchemy import Column, Integer, String, Text, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin, ModeratedMixin
from tripadmin.models.morph import MorphTarget


class Review(TimestampMixin, ModeratedMixin, Base):
    __tablename__ = "reviews"

    TARGETS = MorphTarget("place", "trip")

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    reviewable_type = Column(String(64), nullable=False, index=True)
    reviewable_id = Column(Integer, nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)

    user = relationship("User")

    @property
    def reviewable(self):
        return self.TARGETS.resolve(object_session(self), self.reviewable_type, self.reviewable_id)
