from sqlalchemy import Column, Integer, String, Text, ForeignKey

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class Translation(TimestampMixin, Base):
    __tablename__ = "translations"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    source_type = Column(String(32), nullable=False)  # text, ocr, speech
    source_text = Column(Text, nullable=True)
    source_language = Column(String(16), nullable=False)
    translated_text = Column(Text, nullable=False)
    target_language = Column(String(16), nullable=False)
    file_path = Column(String(512), nullable=True)
