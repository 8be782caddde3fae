from datetime import datetime

from sqlalchemy import Column, DateTime, Boolean
from sqlalchemy.types import JSON


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow, nullable=True)


# Confidence above which an image moderation category flags the record
MODERATION_FLAG_THRESHOLD = 0.7
MODERATION_FLAG_CATEGORIES = ("adult", "violence")


class ModeratedMixin:
    """Image attachments with moderation results and a flagged marker."""

    images = Column(JSON, nullable=True)
    moderation_results = Column(JSON, nullable=True)
    is_flagged = Column(Boolean, default=False, nullable=False)

    def add_image(self, path: str, moderation_result: dict) -> None:
        self.images = [*(self.images or []), path]
        self.moderation_results = moderation_result
        if should_flag(moderation_result):
            self.is_flagged = True


def should_flag(moderation_result: dict | None) -> bool:
    if not moderation_result:
        return False
    for category in MODERATION_FLAG_CATEGORIES:
        confidence = (moderation_result.get(category) or {}).get("confidence") or 0
        if confidence > MODERATION_FLAG_THRESHOLD:
            return True
    return False
