from sqlalchemy import Column, Integer, String, Float

from tripadmin.core.db import Base
from tripadmin.models.mixins import TimestampMixin


class Place(TimestampMixin, Base):
    __tablename__ = "places"

    id = Column(Integer, primary_key=True)
    external_place_id = Column(String(255), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(512), nullable=True)
    lat = Column(Float, nullable=False, index=True)
    lng = Column(Float, nullable=False, index=True)
    category = Column(String(64), nullable=True)
