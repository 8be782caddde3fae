from sqlalchemy.orm import relationship, object_session
from sqlalchemy import Column, Integer, String, Text, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin, ModeratedMixin
from tripadmin.models.morph import MorphTarget


class Comment(TimestampMixin, ModeratedMixin, Base):
    __tablename__ = "comments"

    TARGETS = MorphTarget("trip", "map_checkpoint", "trip_diary")

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    entity_type = Column(String(64), nullable=False, index=True)
    entity_id = Column(Integer, nullable=False, index=True)
    content = Column(Text, nullable=False)

    user = relationship("User")

    @property
    def entity(self):
        return self.TARGETS.resolve(object_session(self), self.entity_type, self.entity_id)
