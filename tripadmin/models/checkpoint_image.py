from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from sqlalchemy.types import JSON

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin, should_flag


class CheckpointImage(TimestampMixin, Base):
    __tablename__ = "checkpoint_images"

    id = Column(Integer, primary_key=True)
    map_checkpoint_id = Column(Integer, ForeignKey("map_checkpoints.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    file_path = Column(String(512), nullable=False)
    caption = Column(String(255), nullable=True)
    uploaded_at = Column(DateTime(timezone=True), nullable=False)
    moderation_results = Column(JSON, nullable=True)
    is_flagged = Column(Boolean, default=False, nullable=False)

    checkpoint = relationship("MapCheckpoint", back_populates="images")
    user = relationship("User")

    def apply_moderation(self, moderation_result: dict) -> None:
        self.moderation_results = moderation_result
        if should_flag(moderation_result):
            self.is_flagged = True
