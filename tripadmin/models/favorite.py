from sqlalchemy.orm import relationship, object_session
from sqlalchemy import Column, Integer, String, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin
from tripadmin.models.morph import MorphTarget


class Favorite(TimestampMixin, Base):
    __tablename__ = "favorites"

    TARGETS = MorphTarget("place", "trip", "map_checkpoint")

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    favoritable_type = Column(String(64), nullable=False)
    favoritable_id = Column(Integer, nullable=False)

    user = relationship("User")

    @property
    def favoritable(self):
        return self.TARGETS.resolve(object_session(self), self.favoritable_type, self.favoritable_id)
