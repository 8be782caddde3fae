from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class PersonalAccessToken(TimestampMixin, Base):
    """Issued bearer token; a token stays valid only while its row exists."""
    __tablename__ = "personal_access_tokens"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    token_id = Column(String(64), unique=True, nullable=False, index=True)
    last_used_at = Column(DateTime(timezone=True), nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="tokens")
